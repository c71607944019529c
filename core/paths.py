import os
import sys

# Project root when running from source (one level up from core/)
SOURCE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def get_resource_path(relative_path):
    """ Resolve a bundled resource, from source or from a PyInstaller bundle """
    base_path = getattr(sys, "_MEIPASS", SOURCE_ROOT)
    return os.path.join(base_path, relative_path)


def platform_stylesheet_name(system: str) -> str:
    if system == "Darwin":
        return "ui/styles/macos.qss"
    return "ui/styles/windows.qss"
