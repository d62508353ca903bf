"""Cover-fit rendering of a single image into a target rectangle."""
from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from .geometry import clamp_unit, cover_fit_window
from .utils import ImageSource, as_pil


def render_cover_fit(
    image: ImageSource,
    target_width: int,
    target_height: int,
    focal_x: float = 0.5,
    focal_y: float = 0.5,
    resample: Image.Resampling = Image.Resampling.LANCZOS,
) -> np.ndarray:
    """Crop and scale *image* so it completely fills ``target_width x target_height``.

    Parameters
    ----------
    image:
        Source image (Pillow image or array). It is not modified.
    target_width, target_height:
        Output size in pixels.
    focal_x, focal_y:
        Position of the crop window inside the excess, ``0`` keeping the
        left/top edge and ``1`` the right/bottom edge. Clamped to ``[0, 1]``.
    resample:
        Pillow resampling filter used for the (possibly fractional) window.

    Returns
    -------
    numpy.ndarray
        ``(target_height, target_width, 3)`` ``uint8`` RGB array.
    """
    src = as_pil(image)
    window = cover_fit_window(
        src.width,
        src.height,
        target_width,
        target_height,
        clamp_unit(focal_x),
        clamp_unit(focal_y),
    )
    logging.debug(
        "render_cover_fit: %dx%d -> %dx%d window=%s",
        src.width,
        src.height,
        target_width,
        target_height,
        window,
    )
    x0, y0, x1, y1 = window.box()
    box = (x0, y0, min(x1, src.width), min(y1, src.height))
    out = src.resize((target_width, target_height), resample=resample, box=box)
    return np.array(out, dtype=np.uint8)
