"""Command line interface for carousel_tiles."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Tuple

import yaml

from .config import (
    DEFAULT_PEEK_NAME,
    DEFAULT_PEEK_PERCENT,
    DEFAULT_SPLIT_NAME,
    JPEG_QUALITY,
    LOG_LEVEL,
)
from .export import write_tiles, write_zip
from .geometry import optimal_segment_count
from .image_io import expand_inputs, load_image, stem_for
from .validate import validate_args


def _focal_type(x: str) -> Tuple[float, float]:
    try:
        fx, fy = (float(v) for v in x.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError("--focal format X,Y") from e
    return fx, fy


def _unique_path(path: str) -> str:
    if not os.path.exists(path):
        return path
    root, ext = os.path.splitext(path)
    i = 2
    while True:
        cand = f"{root}_{i}{ext}"
        if not os.path.exists(cand):
            return cand
        i += 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cut images into square carousel tiles")
    parser.add_argument("inputs", nargs="+", help="Input image files or folders")
    parser.add_argument("--preset", action="append", default=[], help="Path to YAML preset overriding defaults")
    parser.add_argument("--mode", choices=["split", "peek"], default="split", help="Uniform split of one image or peek sequence of many")
    parser.add_argument("--segments", type=int, default=None, help="Segment count for split mode (default: from aspect ratio)")
    parser.add_argument("--align", type=float, default=0.5, help="Vertical crop position in split mode, 0 top .. 1 bottom")
    parser.add_argument("--peek", type=int, default=DEFAULT_PEEK_PERCENT, help="Peek strip width in percent of the tile")
    parser.add_argument("--blur", action="store_true", help="Blur the peek strip")
    parser.add_argument("--focal", type=_focal_type, action="append", default=None, help="Focal point X,Y per image in peek mode (repeatable)")
    parser.add_argument("--focus", choices=["manual", "auto"], default="manual", help="Detect focal points automatically in peek mode")
    parser.add_argument("--workers", type=int, default=1, help="Threads for peek pre-renders")
    parser.add_argument("--out", default=".", help="Output folder")
    parser.add_argument("--name", help="Output file name stem")
    parser.add_argument("--zip", action="store_true", help="Package tiles into a single ZIP archive")
    parser.add_argument("--quality", type=int, default=JPEG_QUALITY, help="JPEG quality 1-100")
    parser.add_argument("--validate", action="store_true", help="Validate arguments and exit")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")

    prelim, _ = parser.parse_known_args(argv)
    for path in prelim.preset:
        with open(path, "r", encoding="utf8") as fh:
            data = yaml.safe_load(fh) or {}
        parser.set_defaults(**{k.replace("-", "_"): v for k, v in data.items()})

    args = parser.parse_args(argv)
    if isinstance(args.focal, list):
        args.focal = [tuple(p) for p in args.focal]
    return args


def _render_split(args: argparse.Namespace, paths: List[str]):
    from .splitter import split_into_segments

    if len(paths) != 1:
        raise SystemExit(f"split mode takes exactly one image, found {len(paths)}")
    img = load_image(paths[0])
    segments = args.segments or optimal_segment_count(img.width, img.height)
    logging.info("splitting %s (%dx%d) into %d segments", paths[0], img.width, img.height, segments)
    tiles = split_into_segments(img, segments, args.align)
    return tiles, args.name or stem_for(paths[0]) or DEFAULT_SPLIT_NAME


def _render_peek(args: argparse.Namespace, paths: List[str]):
    from .peek import PeekConfig, compose_peek_sequence, peek_layout

    cfg = PeekConfig(args.peek, args.blur)
    images = [load_image(p) for p in paths]
    focal = args.focal
    if args.focus == "auto" and len(images) >= 2:
        from .focus import auto_focal_point

        layout = peek_layout(images, cfg.peek_percent)
        target = (layout.wide_width, layout.size)
        focal = [auto_focal_point(img, target) for img in images]
    tiles = compose_peek_sequence(
        images,
        peek_percent=cfg.peek_percent,
        blur=cfg.blur,
        focal_points=focal,
        workers=args.workers,
    )
    return tiles, args.name or DEFAULT_PEEK_NAME


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(levelname)s %(message)s",
    )
    errs = validate_args(args)
    if errs:
        for e in errs:
            print(f"validation error: {e}", file=sys.stderr)
        raise SystemExit(1)
    if args.validate:
        return

    paths = expand_inputs(args.inputs)
    if args.mode == "split":
        tiles, stem = _render_split(args, paths)
    else:
        tiles, stem = _render_peek(args, paths)
    if not tiles:
        logging.warning("peek mode needs at least two images, got %d", len(paths))
        return

    if args.zip:
        out = _unique_path(os.path.join(args.out, f"{stem}.zip"))
        write_zip(tiles, out, stem, quality=args.quality)
    else:
        write_tiles(tiles, args.out, stem, quality=args.quality)


if __name__ == "__main__":
    main()
