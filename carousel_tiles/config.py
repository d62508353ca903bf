"""Configuration helpers for carousel_tiles."""
from __future__ import annotations

import os

IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".bmp", ".webp"}

MIN_SEGMENTS = 2
MAX_SEGMENTS = 10

MIN_PEEK_PERCENT = 0
MAX_PEEK_PERCENT = 20
DEFAULT_PEEK_PERCENT = 10

# Peek strip blur: gaussian sigma, extra columns drawn under the strip and the
# unblurred seam width redrawn from the main image.
PEEK_BLUR_SIGMA = 8
PEEK_BLUR_PAD = 4
PEEK_SEAM_PX = 2

JPEG_QUALITY = int(os.environ.get("CAROUSEL_TILES_JPEG_QUALITY") or 100)
PREVIEW_JPEG_QUALITY = 70

LOG_LEVEL = os.environ.get("CAROUSEL_TILES_LOG_LEVEL") or "INFO"

DEFAULT_SPLIT_NAME = "carousel"
DEFAULT_PEEK_NAME = "peek-carousel"
