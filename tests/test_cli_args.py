import argparse

import pytest

from carousel_tiles.__main__ import parse_args
from carousel_tiles.config import DEFAULT_PEEK_PERCENT
from carousel_tiles.validate import validate_args


def test_defaults():
    args = parse_args(["pano.jpg"])
    assert args.mode == "split"
    assert args.segments is None
    assert args.align == 0.5
    assert args.peek == DEFAULT_PEEK_PERCENT
    assert args.blur is False
    assert validate_args(args) == []


def test_focal_parsed_per_image():
    args = parse_args(["a.jpg", "b.jpg", "--mode", "peek", "--focal", "0.1,0.9", "--focal", "1,0"])
    assert args.focal == [(0.1, 0.9), (1.0, 0.0)]


def test_focal_bad_format():
    with pytest.raises(SystemExit):
        parse_args(["a.jpg", "--focal", "0.5"])


def test_focal_out_of_range_reported():
    args = parse_args(["a.jpg", "b.jpg", "--mode", "peek", "--focal", "1.5,0.5"])
    assert any("--focal" in e for e in validate_args(args))


def test_preset_overrides_defaults(tmp_path):
    preset = tmp_path / "peek.yaml"
    preset.write_text("mode: peek\npeek: 15\nblur: true\nfocal:\n  - [0.2, 0.3]\n")
    args = parse_args(["a.jpg", "b.jpg", "--preset", str(preset)])
    assert args.mode == "peek"
    assert args.peek == 15
    assert args.blur is True
    assert args.focal == [(0.2, 0.3)]


def test_cli_flag_beats_preset(tmp_path):
    preset = tmp_path / "p.yaml"
    preset.write_text("peek: 15\n")
    args = parse_args(["a.jpg", "--preset", str(preset), "--peek", "5"])
    assert args.peek == 5


def test_validate_workers():
    args = argparse.Namespace(
        segments=None,
        align=0.5,
        peek=10,
        focal=None,
        focus="manual",
        quality=90,
        workers=0,
        mode="peek",
        inputs=["a", "b"],
    )
    assert validate_args(args) == ["--workers must be >= 1"]
