"""Tests for the image lister."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from core.errors import (AccessError, ErrorKind, InvalidArgumentError, NoImagesFound,
                         NotADirectoryPathError, ReadError)
from core.image_loader import SUPPORTED_EXTENSIONS, file_extension, is_supported_image, list_images


def test_list_images_example_folder(image_dir: Path) -> None:
    """Only supported files are returned; text files and subdirectories are skipped."""
    images = list_images(str(image_dir))
    assert set(images) == {
        os.path.join(str(image_dir), "a.png"),
        os.path.join(str(image_dir), "C.JPG"),
    }


def test_list_images_matches_case_insensitively(tmp_path: Path) -> None:
    for name in ["one.PNG", "two.Jpg", "three.jpeg", "four.GIF", "five.bmp", "six.tiff", "README"]:
        (tmp_path / name).touch()
    names = {os.path.basename(p) for p in list_images(str(tmp_path))}
    assert names == {"one.PNG", "two.Jpg", "three.jpeg", "four.GIF"}


def test_list_images_joins_with_input_path(tmp_path: Path) -> None:
    (tmp_path / "x.gif").touch()
    assert list_images(str(tmp_path)) == [os.path.join(str(tmp_path), "x.gif")]


def test_list_images_does_not_recurse(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "deep.png").touch()
    (tmp_path / "top.png").touch()
    assert [os.path.basename(p) for p in list_images(str(tmp_path))] == ["top.png"]


def test_list_images_skips_directory_named_like_image(tmp_path: Path) -> None:
    (tmp_path / "album.jpg").mkdir()
    with pytest.raises(NoImagesFound):
        list_images(str(tmp_path))


def test_list_images_only_subdirectories(tmp_path: Path) -> None:
    (tmp_path / "one").mkdir()
    (tmp_path / "two").mkdir()
    with pytest.raises(NoImagesFound) as exc_info:
        list_images(str(tmp_path))
    assert exc_info.value.kind is ErrorKind.NO_IMAGES_FOUND


def test_list_images_empty_folder(tmp_path: Path) -> None:
    """An empty result is reported as an error, not as []."""
    with pytest.raises(NoImagesFound):
        list_images(str(tmp_path))


def test_list_images_missing_path(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist"
    with pytest.raises(AccessError) as exc_info:
        list_images(str(missing))
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_list_images_regular_file(tmp_path: Path) -> None:
    file_path = tmp_path / "photo.png"
    file_path.touch()
    with pytest.raises(NotADirectoryPathError):
        list_images(str(file_path))


def test_list_images_empty_path_does_not_touch_filesystem() -> None:
    with patch("core.image_loader.os.stat") as stat_mock, \
            patch("core.image_loader.os.scandir") as scandir_mock:
        with pytest.raises(InvalidArgumentError):
            list_images("")
    stat_mock.assert_not_called()
    scandir_mock.assert_not_called()


def test_list_images_read_failure(tmp_path: Path) -> None:
    denied = PermissionError(13, "Permission denied")
    with patch("core.image_loader.os.scandir", side_effect=denied):
        with pytest.raises(ReadError) as exc_info:
            list_images(str(tmp_path))
    assert exc_info.value.cause is denied
    assert "Permission denied" in str(exc_info.value)


def test_supported_extensions_are_lowercase_and_frozen() -> None:
    assert isinstance(SUPPORTED_EXTENSIONS, frozenset)
    assert all(ext == ext.lower() and ext.startswith(".") for ext in SUPPORTED_EXTENSIONS)


def test_is_supported_image() -> None:
    assert is_supported_image("a.JPEG")
    assert not is_supported_image("archive.png.zip")
    assert not is_supported_image("png")


def test_list_images_bare_extension_filename(tmp_path: Path) -> None:
    """A file named only '.png' has extension '.png' and is listed."""
    (tmp_path / ".png").touch()
    (tmp_path / ".hidden").touch()
    assert list_images(str(tmp_path)) == [os.path.join(str(tmp_path), ".png")]


def test_file_extension() -> None:
    assert file_extension(".png") == ".png"
    assert file_extension("photo.tar.JPG") == ".JPG"
    assert file_extension("README") == ""


def test_list_images_lists_symlink_to_directory(tmp_path: Path) -> None:
    """Links are entries of the folder; only real subdirectories are skipped."""
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link.jpg"
    try:
        link.symlink_to(target, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")
    assert list_images(str(tmp_path)) == [os.path.join(str(tmp_path), "link.jpg")]
