"""JPEG encoding and ZIP packaging of rendered tiles."""
from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import List, Sequence

import numpy as np
from PIL import Image

from .config import JPEG_QUALITY


def encode_jpeg(tile: np.ndarray, quality: int = JPEG_QUALITY) -> bytes:
    """Encode an RGB tile as JPEG bytes.

    ``quality`` is Pillow's 1-100 scale; 100 also disables chroma
    subsampling.
    """
    if not (1 <= quality <= 100):
        raise ValueError(f"JPEG quality must be within [1, 100], got {quality}")
    buf = BytesIO()
    subsampling = 0 if quality >= 95 else 2
    Image.fromarray(tile).save(buf, "JPEG", quality=quality, subsampling=subsampling)
    return buf.getvalue()


def tile_names(stem: str, count: int) -> List[str]:
    """``stem-1.jpg`` ... ``stem-N.jpg``."""
    return [f"{stem}-{i}.jpg" for i in range(1, count + 1)]


def write_tiles(
    tiles: Sequence[np.ndarray],
    out_dir: str | Path,
    stem: str,
    quality: int = JPEG_QUALITY,
) -> List[Path]:
    """Write every tile as a JPEG file into *out_dir* and return the paths."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for name, tile in zip(tile_names(stem, len(tiles)), tiles):
        path = out_dir / name
        path.write_bytes(encode_jpeg(tile, quality))
        logging.info("wrote %s", path)
        paths.append(path)
    return paths


def write_zip(
    tiles: Sequence[np.ndarray],
    out_path: str | Path,
    stem: str,
    quality: int = JPEG_QUALITY,
) -> Path:
    """Package the tiles as ``stem-i.jpg`` entries of a ZIP archive.

    A ``.zip`` suffix is appended to *out_path* when missing.
    """
    out_path = Path(out_path)
    if out_path.suffix != ".zip":
        out_path = out_path.with_suffix(".zip")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(out_path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, tile in zip(tile_names(stem, len(tiles)), tiles):
            zf.writestr(name, encode_jpeg(tile, quality))
    logging.info("wrote %s (%d tiles)", out_path, len(tiles))
    return out_path
