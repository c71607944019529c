"""Host context: the handle to the running GUI used to open native dialogs."""

from typing import Protocol

from PySide6.QtWidgets import QFileDialog, QWidget


class Host(Protocol):
    def open_directory_dialog(self, title: str) -> str | None:
        ...


class QtHost:
    """Opens dialogs parented to the application's main window."""

    def __init__(self, parent: QWidget, start_dir: str = ""):
        self.parent = parent
        self.start_dir = start_dir

    def open_directory_dialog(self, title: str) -> str:
        # Returns "" on cancel
        return QFileDialog.getExistingDirectory(
            self.parent, title, self.start_dir, QFileDialog.Option.ShowDirsOnly
        )
