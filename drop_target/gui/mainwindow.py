"""Demo window for drop-target.

Shows a drop area and a log of everything dropped onto it.
"""

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPlainTextEdit, QSizePolicy
)
from PySide6.QtCore import Slot

from .widgets.drop_zone import DropZone
from ..adapter import DropTargetAdapter

# Longest text drop echoed into the log before it gets shortened
MAX_TEXT_PREVIEW = 200


class MainWindow(QMainWindow):
    """The demo application window."""

    def __init__(self) -> None:
        """Builds the layout and attaches the drop adapter to the drop zone."""
        super().__init__()
        self.setWindowTitle("drop-target demo")
        self.resize(640, 480)

        main_container = QWidget()
        layout = QVBoxLayout(main_container)

        self.drop_zone = DropZone()
        self.drop_zone.setFixedHeight(150)
        self.drop_zone.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        layout.addWidget(self.drop_zone, stretch=1)

        self.drop_log = QPlainTextEdit()
        self.drop_log.setPlaceholderText("Dropped files, folders and text will be listed here...")
        self.drop_log.setReadOnly(True)
        layout.addWidget(self.drop_log, stretch=3)

        self.setCentralWidget(main_container)

        self.drop_adapter = DropTargetAdapter(
            self.drop_zone,
            on_file_drop=self._on_file_drop,
            on_folder_drop=self._on_folder_drop,
            on_text_drop=self._on_text_drop,
        )

    @Slot(str)
    def _on_file_drop(self, path: str) -> None:
        print(f"MainWindow: File drop received: {path}")
        self.drop_log.appendPlainText(f"File: {path}")

    @Slot(str)
    def _on_folder_drop(self, path: str) -> None:
        print(f"MainWindow: Folder drop received: {path}")
        self.drop_log.appendPlainText(f"Folder: {path}")

    @Slot(str)
    def _on_text_drop(self, text: str) -> None:
        """Logs a text drop, shortening very long text to keep the log readable."""
        print(f"MainWindow: Text drop received ({len(text)} chars)")
        preview = text if len(text) <= MAX_TEXT_PREVIEW else text[:MAX_TEXT_PREVIEW] + "..."
        self.drop_log.appendPlainText(f"Text: {preview}")
