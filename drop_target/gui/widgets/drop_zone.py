"""A styled QLabel that serves as the visible drop area in the demo window."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QFrame

DEFAULT_PROMPT = "Drop Files, Folders or Text Here"


class DropZone(QLabel):
    """A dashed-border label meant to host a DropTargetAdapter.

    The label itself has no drag handling; the adapter attached to it
    takes care of accepting drops.
    """

    def __init__(self, text: str = DEFAULT_PROMPT, parent=None) -> None:
        """Initializes the DropZone widget."""
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setFrameShadow(QFrame.Shadow.Sunken)
        self.setWordWrap(True)
        self.setStyleSheet("""
            QLabel {
                border: 2px dashed #aaa;
                padding: 20px;
                font-size: 16px;
                color: #666;
            }
        """)
