import os
import stat

from core.errors import (AccessError, InvalidArgumentError, NoImagesFound,
                         NotADirectoryPathError, ReadError)

SUPPORTED_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.gif'})


def file_extension(filename: str) -> str:
    # Everything from the last dot, so ".png" on its own counts as a PNG
    dot = filename.rfind('.')
    return filename[dot:] if dot >= 0 else ""


def is_supported_image(filename: str) -> bool:
    return file_extension(filename).lower() in SUPPORTED_EXTENSIONS


def list_images(directory: str) -> list[str]:
    """
    Return the supported image files directly inside directory (non-recursive).
    Paths keep the order the filesystem returned them in.

    An empty match is NOT an empty success: it raises NoImagesFound, so callers
    expecting [] for a folder without images must catch it.
    """
    if not directory:
        raise InvalidArgumentError("No directory path given")

    try:
        st = os.stat(directory)
    except OSError as e:
        raise AccessError(f"Cannot access directory {directory}", e) from e

    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryPathError(f"Not a directory: {directory}")

    images = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    continue  # subdirectories are not scanned; links are listed as entries
                if is_supported_image(entry.name):
                    images.append(os.path.join(directory, entry.name))
    except OSError as e:
        raise ReadError(f"Cannot read directory {directory}", e) from e

    if not images:
        raise NoImagesFound(f"No image files found in {directory}")

    return images
