"""Segment and crop-window geometry.

Pure integer/float helpers shared by the splitter, the peek compositor and
any overlay preview. Nothing here touches pixel data.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from .config import MAX_SEGMENTS, MIN_SEGMENTS


def round_half_up(value: float) -> int:
    """Round ``x.5`` towards positive infinity instead of to the even neighbour."""
    return int(math.floor(value + 0.5))


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class FocalPoint(NamedTuple):
    """Normalised anchor inside the croppable excess of an image."""

    x: float = 0.5
    y: float = 0.5

    @classmethod
    def clamped(cls, x: float, y: float) -> "FocalPoint":
        fx, fy = clamp_unit(x), clamp_unit(y)
        if (fx, fy) != (x, y):
            logging.warning("focal point (%s, %s) clamped to (%.3f, %.3f)", x, y, fx, fy)
        return cls(fx, fy)


FocalLike = Union[FocalPoint, Tuple[float, float], None]

CENTER = FocalPoint()


def as_focal(value: FocalLike) -> FocalPoint:
    """Normalise ``None`` or an ``(x, y)`` pair to a clamped :class:`FocalPoint`."""
    if value is None:
        return CENTER
    x, y = value
    return FocalPoint.clamped(x, y)


def focal_list(points: Optional[Sequence[FocalLike]], count: int) -> List[FocalPoint]:
    """Return exactly ``count`` focal points, defaulting missing entries to the centre."""
    points = list(points or [])
    if len(points) > count:
        logging.debug("focal_list: ignoring %d extra focal points", len(points) - count)
    return [as_focal(points[i] if i < len(points) else None) for i in range(count)]


class Window(NamedTuple):
    """Source rectangle ``(x, y, width, height)`` in image pixels; may be fractional."""

    x: float
    y: float
    width: float
    height: float

    def box(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


def cover_fit_window(
    image_width: int,
    image_height: int,
    target_width: int,
    target_height: int,
    focal_x: float = 0.5,
    focal_y: float = 0.5,
) -> Window:
    """Return the source window that cover-fits an image into a target.

    The window has the target aspect ratio and spans the full image along one
    axis. The focal point positions it inside the excess along the other axis,
    so the window never leaves the image. When the aspect ratios are equal the
    excess is zero on both axes and the focal point has no effect.
    """
    img_ratio = image_width / image_height
    target_ratio = target_width / target_height
    if img_ratio > target_ratio:
        sh = float(image_height)
        sw = min(float(image_width), image_height * target_ratio)
        sx = (image_width - sw) * focal_x
        sy = 0.0
    else:
        sw = float(image_width)
        sh = min(float(image_height), image_width / target_ratio)
        sx = 0.0
        sy = (image_height - sh) * focal_y
    return Window(sx, sy, sw, sh)


def optimal_segment_count(width: int, height: int) -> int:
    """Suggest a segment count from the aspect ratio, clamped to ``[2, 10]``."""
    optimal = round_half_up(width / height)
    return max(MIN_SEGMENTS, min(MAX_SEGMENTS, optimal))


def segment_side(image_width: int, segment_count: int) -> int:
    return round_half_up(image_width / segment_count)


def segment_boundaries(image_width: int, segment_count: int) -> List[int]:
    """Return the left edge of every segment.

    The side is rounded once and multiplied, so for widths not divisible by
    ``segment_count`` the last segment ends a few pixels before or after the
    right image edge.
    """
    side = segment_side(image_width, segment_count)
    return [i * side for i in range(segment_count)]


def vertical_offset(image_height: int, side: int, align: float) -> int:
    """Top edge of the segment crop for an alignment in ``[0, 1]``."""
    max_sy = max(0, image_height - side)
    return round_half_up(max_sy * clamp_unit(align))


@dataclass
class CropOverlay:
    """Percentages for drawing the split preview over the source image."""

    top_pct: float
    height_pct: float
    can_drag: bool
    columns: List[Tuple[float, float]] = field(default_factory=list)


def crop_overlay(
    image_width: int,
    image_height: int,
    segment_count: int,
    align: float = 0.5,
) -> CropOverlay:
    """Describe the crop band and segment columns relative to the image.

    ``top_pct`` and ``height_pct`` place the kept horizontal band; ``columns``
    holds ``(left_pct, width_pct)`` for each segment. ``can_drag`` is false
    when a segment is at least as tall as the image, since alignment then has
    nothing to move.
    """
    side = segment_side(image_width, segment_count)
    height_pct = side / image_height * 100
    max_offset = image_height - side
    top_pct = clamp_unit(align) * max_offset / image_height * 100 if max_offset > 0 else 0.0
    width_pct = side / image_width * 100
    columns = [
        (left / image_width * 100, width_pct)
        for left in segment_boundaries(image_width, segment_count)
    ]
    return CropOverlay(
        top_pct=top_pct,
        height_pct=height_pct,
        can_drag=side < image_height,
        columns=columns,
    )
