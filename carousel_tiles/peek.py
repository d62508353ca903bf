"""Peek carousel compositing.

Every tile shows its own image plus a thin strip on the right previewing the
next image. Each image is first cover-fit into a *wide* buffer of
``(size + peek_width) x size``: the strip on tile ``i`` shows columns
``[0, peek_width)`` of ``wide[i + 1]`` and tile ``i + 1`` continues at column
``peek_width``, so swiping shows no repeated or missing content.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .config import (
    DEFAULT_PEEK_PERCENT,
    MAX_PEEK_PERCENT,
    MIN_PEEK_PERCENT,
    PEEK_BLUR_PAD,
    PEEK_BLUR_SIGMA,
    PEEK_SEAM_PX,
)
from .cover import render_cover_fit
from .geometry import FocalLike, FocalPoint, focal_list, round_half_up
from .utils import ImageSource, gaussian_blur, image_size, paste_columns


@dataclass
class PeekConfig:
    peek_percent: int = DEFAULT_PEEK_PERCENT
    blur: bool = False

    def __post_init__(self) -> None:
        clamped = max(MIN_PEEK_PERCENT, min(MAX_PEEK_PERCENT, int(self.peek_percent)))
        if clamped != self.peek_percent:
            logging.warning("peek_percent %s clamped to %d", self.peek_percent, clamped)
        self.peek_percent = clamped


@dataclass
class PeekLayout:
    """Column layout shared by every tile of a peek sequence."""

    size: int
    peek_width: int

    @property
    def main_width(self) -> int:
        return self.size - self.peek_width

    @property
    def wide_width(self) -> int:
        return self.size + self.peek_width

    def offset(self, index: int) -> int:
        """Column of the wide render where tile ``index`` starts."""
        return 0 if index == 0 else self.peek_width


def peek_layout(images: Sequence[ImageSource], peek_percent: int) -> PeekLayout:
    """Square side from the largest image dimension and the strip width."""
    size = max(max(image_size(img)) for img in images)
    peek_width = round_half_up(size * (peek_percent / 100))
    return PeekLayout(size=size, peek_width=peek_width)


def render_wide(
    images: Sequence[ImageSource],
    layout: PeekLayout,
    focal_points: Sequence[FocalPoint],
    workers: int = 1,
) -> List[np.ndarray]:
    """Cover-fit every image into its wide buffer, in input order.

    The renders are independent of each other; ``workers > 1`` runs them on a
    thread pool.
    """

    def _render(i: int) -> np.ndarray:
        fp = focal_points[i]
        return render_cover_fit(images[i], layout.wide_width, layout.size, fp.x, fp.y)

    if workers > 1 and len(images) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(_render, range(len(images))))
    return [_render(i) for i in range(len(images))]


def _draw_peek_strip(
    tile: np.ndarray,
    current: np.ndarray,
    following: np.ndarray,
    layout: PeekLayout,
    offset: int,
    blur: bool,
) -> None:
    main_w, peek_w = layout.main_width, layout.peek_width
    if peek_w <= 0:
        return
    if not blur:
        paste_columns(tile, following, 0, main_w, peek_w)
        return
    # blurred strip starts a few columns early to hide its soft left edge
    pad = min(PEEK_BLUR_PAD, main_w)
    strip = np.ascontiguousarray(following[:, : peek_w + pad])
    strip = gaussian_blur(strip, sigma=PEEK_BLUR_SIGMA)
    paste_columns(tile, strip, 0, main_w - pad, peek_w + pad)
    # redraw the seam from the main image so blur does not bleed across it
    seam = min(PEEK_SEAM_PX, main_w)
    paste_columns(tile, current, offset + main_w - seam, main_w - seam, seam)


def assemble_tiles(
    wides: Sequence[np.ndarray],
    layout: PeekLayout,
    blur: bool = False,
) -> List[np.ndarray]:
    """Cut the final square tiles out of the wide renders."""
    size = layout.size
    last = len(wides) - 1
    tiles: List[np.ndarray] = []
    for i, wide in enumerate(wides):
        tile = np.zeros((size, size, 3), dtype=np.uint8)
        offset = layout.offset(i)
        if i < last:
            paste_columns(tile, wide, offset, 0, layout.main_width)
            _draw_peek_strip(tile, wide, wides[i + 1], layout, offset, blur)
        else:
            paste_columns(tile, wide, offset, 0, size)
        tiles.append(tile)
    return tiles


def compose_peek_sequence(
    images: Sequence[ImageSource],
    peek_percent: int = DEFAULT_PEEK_PERCENT,
    blur: bool = False,
    focal_points: Optional[Sequence[FocalLike]] = None,
    workers: int = 1,
) -> List[np.ndarray]:
    """Build a square peek tile for every image in *images*.

    Parameters
    ----------
    images:
        Ordered images, at least two. With fewer the result is empty since
        there is nothing to preview.
    peek_percent:
        Strip width as a percentage of the tile side, expected in ``[0, 20]``.
    blur:
        Blur the strip and redraw an unblurred seam next to it.
    focal_points:
        Optional ``(x, y)`` per image; missing entries default to the centre.
    workers:
        Threads used for the wide renders.

    Returns
    -------
    list of numpy.ndarray
        ``len(images)`` RGB arrays of ``size x size`` where ``size`` is the
        largest width or height among the images.
    """
    if len(images) < 2:
        logging.debug("compose_peek_sequence: %d image(s), nothing to composite", len(images))
        return []
    layout = peek_layout(images, peek_percent)
    points = focal_list(focal_points, len(images))
    logging.debug(
        "compose_peek_sequence: %d images size=%d peek=%d main=%d blur=%s",
        len(images),
        layout.size,
        layout.peek_width,
        layout.main_width,
        blur,
    )
    wides = render_wide(images, layout, points, workers=workers)
    return assemble_tiles(wides, layout, blur=blur)
