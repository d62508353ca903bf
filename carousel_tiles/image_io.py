"""Loading source images from disk."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from PIL import Image, ImageOps

from .config import IMAGE_EXTS


def load_image(path: str | Path) -> Image.Image:
    """Open *path* as an upright RGB image fully loaded into memory."""
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.convert("RGB")


def list_images(folder: str | Path) -> List[str]:
    """Return image files in *folder* sorted by name, case-insensitively."""
    paths = [
        os.path.join(folder, f)
        for f in os.listdir(folder)
        if os.path.splitext(f)[1].lower() in IMAGE_EXTS
    ]
    paths.sort(key=lambda s: os.path.basename(s).lower())
    return paths


def expand_inputs(inputs: Iterable[str]) -> List[str]:
    """Expand folders in *inputs* to their images, keeping the given order.

    Raises
    ------
    FileNotFoundError
        If a path does not exist or no image is found at all.
    """
    paths: List[str] = []
    for item in inputs:
        if os.path.isdir(item):
            paths.extend(list_images(item))
        elif os.path.isfile(item):
            paths.append(item)
        else:
            raise FileNotFoundError(f"No such file or folder: {item}")
    if not paths:
        raise FileNotFoundError("No images found in input")
    return paths


def stem_for(path: str | Path) -> str:
    """Output name for *path*: the file name without its extension."""
    return Path(path).stem
