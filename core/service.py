from PySide6.QtCore import QObject

from core.errors import DialogError, NoSelectionError, NotInitializedError, ViewerError
from core.host import Host
from core.image_loader import list_images
from core.log import get_logger

DIALOG_TITLE = "Select Image Folder"

logger = get_logger("service")


class ImageViewerService(QObject):
    """Backend calls made by the viewer window.

    The host is attached once, either here or through on_startup(), and is
    never replaced afterwards.
    """

    def __init__(self, host: Host | None = None, parent=None):
        super().__init__(parent)
        self._host = host

    @property
    def host(self) -> Host | None:
        return self._host

    def on_startup(self, host: Host) -> None:
        if self._host is not None and self._host is not host:
            raise RuntimeError("Host context is already set")
        self._host = host

    def select_directory(self) -> str:
        """Show the native folder dialog and return the chosen path."""
        if self._host is None:
            raise NotInitializedError("Host context is not initialized")

        try:
            directory = self._host.open_directory_dialog(DIALOG_TITLE)
        except Exception as e:
            logger.warning("Directory dialog failed: %s", e)
            raise DialogError("Directory selection failed", e) from e

        if not directory:
            logger.info("Directory selection cancelled")
            raise NoSelectionError("No directory selected")

        logger.info("Selected directory %s", directory)
        return directory

    def get_image_files(self, directory_path: str) -> list[str]:
        try:
            images = list_images(directory_path)
        except ViewerError as e:
            logger.warning("Listing %r failed (%s): %s", directory_path, e.kind.value, e)
            raise
        logger.info("Found %d image(s) in %s", len(images), directory_path)
        return images
