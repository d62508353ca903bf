"""Carousel tiles package."""

from .geometry import optimal_segment_count, segment_boundaries

__all__ = [
    "optimal_segment_count",
    "segment_boundaries",
    "render_cover_fit",
    "split_into_segments",
    "compose_peek_sequence",
]


def render_cover_fit(*args, **kwargs):
    from .cover import render_cover_fit as _render_cover_fit

    return _render_cover_fit(*args, **kwargs)


def split_into_segments(*args, **kwargs):
    from .splitter import split_into_segments as _split_into_segments

    return _split_into_segments(*args, **kwargs)


def compose_peek_sequence(*args, **kwargs):
    from .peek import compose_peek_sequence as _compose_peek_sequence

    return _compose_peek_sequence(*args, **kwargs)
