from pathlib import Path

import pytest
from PIL import Image

from carousel_tiles.image_io import expand_inputs, list_images, load_image, stem_for


def _save(path: Path, size=(20, 10)) -> Path:
    Image.new("RGB", size, (1, 2, 3)).save(path)
    return path


def test_list_images_sorted_case_insensitive(tmp_path: Path) -> None:
    _save(tmp_path / "b.png")
    _save(tmp_path / "A.jpg")
    (tmp_path / "notes.txt").write_text("x")
    names = [Path(p).name for p in list_images(tmp_path)]
    assert names == ["A.jpg", "b.png"]


def test_expand_inputs_keeps_order(tmp_path: Path) -> None:
    folder = tmp_path / "set"
    folder.mkdir()
    _save(folder / "1.png")
    _save(folder / "2.png")
    single = _save(tmp_path / "cover.png")
    paths = expand_inputs([str(single), str(folder)])
    assert [Path(p).name for p in paths] == ["cover.png", "1.png", "2.png"]


def test_expand_inputs_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        expand_inputs([str(tmp_path / "nope.png")])
    with pytest.raises(FileNotFoundError):
        expand_inputs([str(tmp_path)])


def test_load_image_applies_exif_orientation(tmp_path: Path) -> None:
    path = tmp_path / "rotated.jpg"
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 CW on display
    Image.new("RGB", (40, 20), (9, 9, 9)).save(path, exif=exif)
    img = load_image(path)
    assert img.size == (20, 40)
    assert img.mode == "RGB"


def test_stem_for():
    assert stem_for("/tmp/panorama.final.jpg") == "panorama.final"
