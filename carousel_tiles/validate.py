"""Argument validation helpers for the carousel_tiles CLI."""
from __future__ import annotations

from argparse import Namespace
from typing import List

from .config import MAX_PEEK_PERCENT, MAX_SEGMENTS, MIN_PEEK_PERCENT, MIN_SEGMENTS


def validate_args(args: Namespace) -> List[str]:
    """Validate parsed CLI arguments.

    Returns a list of human readable error messages. The caller should abort
    if the list is non-empty.
    """
    errors: List[str] = []
    if args.segments is not None and not (MIN_SEGMENTS <= args.segments <= MAX_SEGMENTS):
        errors.append(f"--segments must be within [{MIN_SEGMENTS},{MAX_SEGMENTS}]")
    if not (0.0 <= args.align <= 1.0):
        errors.append("--align must be within [0,1]")
    if not (MIN_PEEK_PERCENT <= args.peek <= MAX_PEEK_PERCENT):
        errors.append(f"--peek must be within [{MIN_PEEK_PERCENT},{MAX_PEEK_PERCENT}]")
    for x, y in args.focal or []:
        if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
            errors.append(f"--focal {x},{y} out of range")
    if not (1 <= args.quality <= 100):
        errors.append("--quality must be within [1,100]")
    if args.workers < 1:
        errors.append("--workers must be >= 1")
    if args.mode == "split" and len(args.inputs) != 1:
        errors.append("split mode takes exactly one input image")
    if args.focal and args.focus == "auto":
        errors.append("conflict: --focal with --focus auto")
    return errors
