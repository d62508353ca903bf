"""Uniform horizontal split of one wide image into square segments."""
from __future__ import annotations

import logging
from typing import List

import cv2
import numpy as np

from .geometry import segment_boundaries, segment_side, vertical_offset
from .utils import ImageSource, paste_columns, to_rgb_array


def split_into_segments(
    image: ImageSource,
    segment_count: int,
    vertical_align: float = 0.5,
) -> List[np.ndarray]:
    """Split *image* into ``segment_count`` square tiles of equal side.

    The side is ``round(width / segment_count)``. A band of that height is
    taken at ``vertical_align`` (0 top, 1 bottom) and cut at the offsets from
    :func:`segment_boundaries`. Images shorter than the side are stretched
    vertically to fill the square. Columns past the right edge of the image
    (last segment of a non-divisible width) are left black.
    """
    if segment_count < 1:
        raise ValueError(f"segment_count must be >= 1, got {segment_count}")
    src = to_rgb_array(image)
    h, w = src.shape[:2]
    side = segment_side(w, segment_count)
    if side < 1:
        raise ValueError(f"image width {w} too small for {segment_count} segments")
    sy = vertical_offset(h, side, vertical_align)
    source_h = min(side, h)
    band = src[sy : sy + source_h]
    if source_h != side:
        # full image width keeps the horizontal mapping 1:1
        band = cv2.resize(band, (w, side), interpolation=cv2.INTER_CUBIC)
    logging.debug(
        "split_into_segments: %dx%d into %d x %dpx, sy=%d", w, h, segment_count, side, sy
    )

    segments: List[np.ndarray] = []
    for sx in segment_boundaries(w, segment_count):
        tile = np.zeros((side, side, 3), dtype=np.uint8)
        paste_columns(tile, band, sx, 0, side)
        segments.append(tile)
    return segments
