import sys
import os
import platform
from PySide6.QtWidgets import QApplication
from ui.main_window import MainWindow
from core.config import load_config
from core.host import QtHost
from core.log import setup_logging, get_logger
from core.paths import get_resource_path, platform_stylesheet_name
from core.service import ImageViewerService


def _load_platform_stylesheet() -> str:
    style_path = get_resource_path(platform_stylesheet_name(platform.system()))
    if not os.path.exists(style_path):
        get_logger("main").warning("Stylesheet not found: %s", style_path)
        return ""

    with open(style_path, "r", encoding="utf-8") as f:
        return f.read()

def main():
    config = load_config(sys.argv[1:])
    setup_logging(config.log_level, config.log_file)

    app = QApplication(sys.argv)
    stylesheet = _load_platform_stylesheet()
    if stylesheet:
        app.setStyleSheet(stylesheet)

    service = ImageViewerService()
    window = MainWindow(service, config)
    service.on_startup(QtHost(window, start_dir=window.settings.value("last_directory", "")))
    get_logger("main").info("Starting %s", config.title)
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
