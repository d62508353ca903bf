import numpy as np
import pytest

from carousel_tiles.cover import render_cover_fit
from carousel_tiles.peek import (
    PeekConfig,
    assemble_tiles,
    compose_peek_sequence,
    peek_layout,
)


def _noise(w: int, h: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8)


def test_scenario_sizes():
    images = [_noise(1000, 800, 1), _noise(800, 1000, 2)]
    layout = peek_layout(images, 10)
    assert (layout.size, layout.peek_width, layout.main_width) == (1000, 100, 900)
    tiles = compose_peek_sequence(images, 10, False)
    assert len(tiles) == 2
    assert all(t.shape == (1000, 1000, 3) for t in tiles)


def test_column_provenance_without_blur():
    images = [_noise(100, 80, 1), _noise(80, 100, 2), _noise(120, 60, 3)]
    tiles = compose_peek_sequence(images, 10, False)
    size, peek, main = 120, 12, 108
    wides = [render_cover_fit(img, size + peek, size) for img in images]
    assert np.array_equal(tiles[0][:, :main], wides[0][:, :main])
    assert np.array_equal(tiles[0][:, main:], wides[1][:, :peek])
    assert np.array_equal(tiles[1][:, :main], wides[1][:, peek : peek + main])
    assert np.array_equal(tiles[1][:, main:], wides[2][:, :peek])
    assert np.array_equal(tiles[2], wides[2][:, peek : peek + size])


def test_peek_strip_continues_into_next_tile():
    images = [_noise(90, 60, 4), _noise(60, 90, 5)]
    focal = [(0.2, 0.8), (0.7, 0.1)]
    tiles = compose_peek_sequence(images, 15, False, focal)
    layout = peek_layout(images, 15)
    wide_next = render_cover_fit(images[1], layout.wide_width, layout.size, 0.7, 0.1)
    assert np.array_equal(tiles[0][:, layout.main_width], wide_next[:, 0])
    # the next tile starts right after the strip
    assert np.array_equal(tiles[1][:, 0], wide_next[:, layout.peek_width])


@pytest.mark.parametrize("count", [0, 1])
def test_fewer_than_two_images_is_empty(count):
    images = [_noise(50, 50, i) for i in range(count)]
    assert compose_peek_sequence(images, 10, False) == []


def test_zero_peek_gives_plain_squares():
    images = [_noise(80, 40, 6), _noise(40, 80, 7)]
    tiles = compose_peek_sequence(images, 0, True)
    for img, tile in zip(images, tiles):
        assert np.array_equal(tile, render_cover_fit(img, 80, 80))


def test_blur_keeps_main_and_redraws_seam():
    images = [_noise(200, 200, 8), _noise(200, 200, 9)]
    sharp = compose_peek_sequence(images, 10, False)
    blurred = compose_peek_sequence(images, 10, True)
    main = 180
    # main content left of the blur pad is untouched
    assert np.array_equal(blurred[0][:, : main - 4], sharp[0][:, : main - 4])
    # seam columns come from the main image, unblurred
    assert np.array_equal(blurred[0][:, main - 2 : main], sharp[0][:, main - 2 : main])
    # the strip itself is smoothed
    assert blurred[0][:, main + 2 :].std() < sharp[0][:, main + 2 :].std()
    # the last tile has no strip
    assert np.array_equal(blurred[1], sharp[1])


def test_focal_point_changes_framing():
    images = [_noise(300, 100, 10), _noise(100, 100, 11)]
    left = compose_peek_sequence(images, 10, False, [(0.0, 0.5)])
    right = compose_peek_sequence(images, 10, False, [(1.0, 0.5)])
    assert not np.array_equal(left[0], right[0])
    assert np.array_equal(left[1], right[1])


def test_workers_give_same_result():
    images = [_noise(64, 48, i) for i in range(4)]
    single = compose_peek_sequence(images, 20, True, workers=1)
    pooled = compose_peek_sequence(images, 20, True, workers=3)
    assert all(np.array_equal(a, b) for a, b in zip(single, pooled))


def test_assemble_tiles_is_pure():
    images = [_noise(40, 40, 12), _noise(40, 40, 13)]
    layout = peek_layout(images, 10)
    wides = [render_cover_fit(img, layout.wide_width, layout.size) for img in images]
    copies = [w.copy() for w in wides]
    assemble_tiles(wides, layout, blur=True)
    assert all(np.array_equal(a, b) for a, b in zip(wides, copies))


def test_peek_config_clamps(caplog):
    assert PeekConfig(35, True).peek_percent == 20
    assert PeekConfig(-3).peek_percent == 0
    assert PeekConfig(12).peek_percent == 12
    assert "clamped" in caplog.text
