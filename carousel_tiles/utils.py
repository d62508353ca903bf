"""Pixel buffer helpers shared by the renderers."""
from __future__ import annotations

from typing import Tuple, Union

import cv2
import numpy as np
from PIL import Image

ImageSource = Union[Image.Image, np.ndarray]


def to_rgb_array(image: ImageSource) -> np.ndarray:
    """Return *image* as an ``(H, W, 3)`` ``uint8`` RGB array.

    Pillow images are converted to RGB, grey arrays are expanded to three
    channels and an alpha channel is dropped. The input is never modified.
    """
    if isinstance(image, Image.Image):
        arr = np.asarray(image.convert("RGB"))
    else:
        arr = np.asarray(image)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        elif arr.ndim == 3 and arr.shape[2] == 4:
            arr = arr[:, :, :3]
        elif arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"unsupported image shape: {arr.shape}")
        if arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)
    h, w = arr.shape[:2]
    if w < 1 or h < 1:
        raise ValueError(f"empty image: {w}x{h}")
    return arr


def as_pil(image: ImageSource) -> Image.Image:
    """Return an RGB Pillow image for *image*."""
    if isinstance(image, Image.Image):
        return image if image.mode == "RGB" else image.convert("RGB")
    return Image.fromarray(to_rgb_array(image))


def image_size(image: ImageSource) -> Tuple[int, int]:
    """Return ``(width, height)`` of *image* without converting pixels."""
    if isinstance(image, Image.Image):
        return image.size
    h, w = np.asarray(image).shape[:2]
    return w, h


def gaussian_blur(
    img: np.ndarray,
    ksize: Tuple[int, int] = (0, 0),
    sigma: float = 0,
) -> np.ndarray:
    """Apply Gaussian blur with validated kernel parameters.

    Parameters
    ----------
    img:
        Input image array.
    ksize:
        Kernel width and height. Each dimension will be forced odd and
        clamped to ``min(width, height)`` of *img*.
    sigma:
        Standard deviation for Gaussian kernel. When ``ksize`` is ``(0, 0)``,
        ``sigma`` must be ``> 0``.
    """

    h, w = img.shape[:2]
    limit = min(w, h)
    kw, kh = ksize
    if kw <= 0 or kh <= 0:
        if sigma <= 0:
            raise ValueError("sigma must be > 0 when kernel size is (0,0)")
        k = (0, 0)
    else:
        kw = min(kw, limit)
        kh = min(kh, limit)
        if kw % 2 == 0:
            kw = max(1, kw - 1)
        if kh % 2 == 0:
            kh = max(1, kh - 1)
        k = (kw, kh)
    return cv2.GaussianBlur(img, k, sigma)


def paste_columns(
    dst: np.ndarray,
    src: np.ndarray,
    src_x: int,
    dst_x: int,
    width: int,
) -> None:
    """Copy ``width`` columns of *src* starting at ``src_x`` into *dst* at ``dst_x``.

    Columns falling outside either buffer are skipped, like a canvas draw
    with a partly out-of-range source rectangle.
    """
    if src_x < 0:
        dst_x -= src_x
        width += src_x
        src_x = 0
    if dst_x < 0:
        src_x -= dst_x
        width += dst_x
        dst_x = 0
    width = min(width, src.shape[1] - src_x, dst.shape[1] - dst_x)
    if width <= 0:
        return
    h = min(dst.shape[0], src.shape[0])
    dst[:h, dst_x : dst_x + width] = src[:h, src_x : src_x + width]
