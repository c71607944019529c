"""
Pytest configuration and shared fixtures.

Qt tests run on the offscreen platform so they work in CI without a display.
"""
import os
import sys
from pathlib import Path

import pytest

# Must be set before any PySide6 import
if sys.platform.startswith("linux"):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for the test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def make_image():
    """Write a small real image with Pillow and return its path."""
    from PIL import Image

    def _make(path: Path, size=(4, 3), color="red", fmt=None) -> Path:
        img = Image.new("RGB", size, color=color)
        img.save(path, fmt)
        return path

    return _make


@pytest.fixture
def image_dir(tmp_path: Path, make_image) -> Path:
    """Folder with two images, a text file and a subdirectory."""
    make_image(tmp_path / "a.png", fmt="PNG")
    make_image(tmp_path / "C.JPG", fmt="JPEG")
    (tmp_path / "b.txt").write_text("not an image", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    return tmp_path


class FakeHost:
    """Host whose dialog returns a canned answer or raises."""

    def __init__(self, answer="", error=None):
        self.answer = answer
        self.error = error
        self.titles = []

    def open_directory_dialog(self, title):
        self.titles.append(title)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_host_factory():
    return FakeHost
