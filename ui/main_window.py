import os

from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                               QPushButton, QStackedWidget, QSizePolicy)
from PySide6.QtCore import Qt, QSettings
from PySide6.QtGui import QImageReader, QPixmap

from core.config import APP_NAME, ORGANIZATION, AppConfig
from core.errors import NoSelectionError, ViewerError
from core.host import QtHost
from core.log import get_logger
from core.service import ImageViewerService
from core import viewer_state as vs

logger = get_logger("ui")

PAGE_IDLE = 0
PAGE_LOADING = 1
PAGE_ERROR = 2
PAGE_VIEWING = 3


class MainWindow(QMainWindow):
    def __init__(self, service: ImageViewerService, config: AppConfig | None = None, settings=None):
        super().__init__()
        self.service = service
        self.config = config or AppConfig()
        self.settings = settings if settings is not None else QSettings(ORGANIZATION, APP_NAME)
        self.state = vs.ViewerState()
        self._pixmap = None

        self.setWindowTitle(self.config.title)
        self.resize(self.config.width, self.config.height)
        geometry = self.settings.value("geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)

        self.central_widget = QWidget()
        self.central_widget.setStyleSheet(f"background-color: {self.config.background_color};")
        self.setCentralWidget(self.central_widget)

        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(15)

        # Header
        header = QHBoxLayout()
        title = QLabel(self.config.title)
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        header.addWidget(title)
        header.addStretch()

        self.select_btn = QPushButton("Select Folder")
        self.select_btn.setFixedSize(120, 30)
        self.select_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.select_btn.clicked.connect(self.select_directory)
        header.addWidget(self.select_btn)
        self.main_layout.addLayout(header)

        # Body pages, one per status
        self.pages = QStackedWidget()
        self.main_layout.addWidget(self.pages, stretch=1)

        self.idle_label = QLabel("Select a folder to view images")
        self.idle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.pages.addWidget(self.idle_label)

        self.loading_label = QLabel("Loading...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.pages.addWidget(self.loading_label)

        self.pages.addWidget(self._create_error_page())
        self.pages.addWidget(self._create_viewing_page())

        self.render()

    def _create_error_page(self):
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()
        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setStyleSheet("color: #c62828;")
        layout.addWidget(self.error_label)

        self.close_error_btn = QPushButton("Close")
        self.close_error_btn.setFixedSize(80, 30)
        self.close_error_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.close_error_btn.clicked.connect(lambda: self.dispatch(vs.Action(vs.CLEAR_ERROR)))
        layout.addWidget(self.close_error_btn, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()
        return page

    def _create_viewing_page(self):
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        layout.addWidget(self.image_label, stretch=1)

        nav = QHBoxLayout()
        nav.addStretch()
        self.prev_btn = QPushButton("← Previous")
        self.prev_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.prev_btn.clicked.connect(self.previous_image)
        nav.addWidget(self.prev_btn)

        self.counter_label = QLabel()
        self.counter_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.counter_label.setMinimumWidth(80)
        nav.addWidget(self.counter_label)

        self.next_btn = QPushButton("Next →")
        self.next_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.next_btn.clicked.connect(self.next_image)
        nav.addWidget(self.next_btn)
        nav.addStretch()
        layout.addLayout(nav)
        return page

    def dispatch(self, action):
        previous_image = vs.current_image(self.state)
        self.state = vs.reduce(self.state, action)
        if vs.current_image(self.state) != previous_image:
            self._load_current_image()
        self.render()

    def select_directory(self):
        self.dispatch(vs.Action(vs.SELECT_DIRECTORY))
        try:
            directory = self.service.select_directory()
        except NoSelectionError:
            self.dispatch(vs.Action(vs.CANCEL_SELECTION))
            return
        except ViewerError as e:
            self._fail(e)
            return

        self._remember_directory(directory)
        self.dispatch(vs.Action(vs.DIRECTORY_SELECTED, directory))
        try:
            images = self.service.get_image_files(directory)
        except ViewerError as e:
            self._fail(e)
            return
        self.dispatch(vs.Action(vs.IMAGES_LOADED, images))

    def _fail(self, error):
        self.dispatch(vs.Action(vs.IMAGE_LOAD_FAILED, f"An error occurred: {error}"))

    def _remember_directory(self, directory):
        self.settings.setValue("last_directory", directory)
        host = self.service.host
        if isinstance(host, QtHost):
            host.start_dir = directory

    def previous_image(self):
        if vs.can_go_previous(self.state):
            self.dispatch(vs.Action(vs.PREV_IMAGE))

    def next_image(self):
        if vs.can_go_next(self.state):
            self.dispatch(vs.Action(vs.NEXT_IMAGE))

    def _load_current_image(self):
        path = vs.current_image(self.state)
        self._pixmap = None
        if path is None:
            return
        reader = QImageReader(path)
        reader.setAutoTransform(True)
        image = reader.read()
        if image.isNull():
            logger.warning("Cannot decode %s: %s", path, reader.errorString())
            return
        self._pixmap = QPixmap.fromImage(image)

    def render(self):
        status = self.state.status
        if status == vs.Status.ERROR:
            self.error_label.setText(self.state.error_message or "")
            self.pages.setCurrentIndex(PAGE_ERROR)
        elif status == vs.Status.LOADING:
            self.pages.setCurrentIndex(PAGE_LOADING)
        elif status == vs.Status.VIEWING:
            self.counter_label.setText(vs.counter_text(self.state))
            self.prev_btn.setEnabled(vs.can_go_previous(self.state))
            self.next_btn.setEnabled(vs.can_go_next(self.state))
            self._update_image_label()
            self.pages.setCurrentIndex(PAGE_VIEWING)
        elif status == vs.Status.IDLE:
            self.pages.setCurrentIndex(PAGE_IDLE)
        # SELECTING keeps the current page behind the dialog

    def _update_image_label(self):
        path = vs.current_image(self.state)
        if self._pixmap is None:
            self.image_label.setPixmap(QPixmap())
            if path:
                self.image_label.setText(f"Cannot display {os.path.basename(path)}")
            return
        scaled = self._pixmap.scaled(self.image_label.size(),
                                     Qt.AspectRatioMode.KeepAspectRatio,
                                     Qt.TransformationMode.SmoothTransformation)
        self.image_label.setPixmap(scaled)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.state.status == vs.Status.VIEWING:
            self._update_image_label()

    def keyPressEvent(self, event):
        if self.state.status == vs.Status.VIEWING:
            if event.key() == Qt.Key.Key_Left:
                self.previous_image()
                return
            if event.key() == Qt.Key.Key_Right:
                self.next_image()
                return
        super().keyPressEvent(event)

    def closeEvent(self, event):
        self.settings.setValue("geometry", self.saveGeometry())
        super().closeEvent(event)
