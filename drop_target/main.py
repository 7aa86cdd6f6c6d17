"""Main entry point for the drop-target demo application."""

import sys
from typing import NoReturn

from PySide6.QtWidgets import QApplication

from .gui.mainwindow import MainWindow


def launch_demo() -> NoReturn:
    """Opens the demo window and runs the Qt event loop until it closes."""
    print("Starting drop-target demo...")

    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    launch_demo()
