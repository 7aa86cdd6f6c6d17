"""Attaches drag-and-drop handling to an existing Qt widget.

The adapter listens for drag-enter, drag-move and drop events on a host
widget and routes each drop to one of three callbacks: dropped files,
dropped folders, or dropped plain text.

When a payload carries both URLs and text (most file managers advertise
both), the URL branch always wins and the text is never delivered.
"""

from typing import Callable, Optional

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QDragEnterEvent, QDragMoveEvent, QDropEvent
from PySide6.QtWidgets import QWidget

from .utils.env import debug_enabled
from .utils.paths import PathKind, classify_path, local_paths

DropCallback = Callable[[str], None]


class DropTargetAdapter(QObject):
    """Turns a QWidget into a drop target for files, folders and text.

    The adapter is parented to the host widget, so it lives exactly as long
    as the widget does. Callbacks run synchronously on the GUI thread, and
    any exception they raise propagates out of the handler unchanged.
    """

    def __init__(
        self,
        widget: QWidget,
        on_file_drop: Optional[DropCallback] = None,
        on_folder_drop: Optional[DropCallback] = None,
        on_text_drop: Optional[DropCallback] = None,
        debug: Optional[bool] = None
    ) -> None:
        """Validates the arguments and registers the adapter on the widget.

        Args:
            widget: The host widget that should accept drops.
            on_file_drop: Called with the path of each dropped regular file.
            on_folder_drop: Called with the path of each dropped directory.
            on_text_drop: Called with the dropped text.
            debug: Print tracing for each handled event. Defaults to the
                   DROP_TARGET_DEBUG environment setting.

        Raises:
            ValueError: If widget is None.
            TypeError: If widget is not a QWidget, or a callback is not callable.
        """
        # Validate everything before touching the widget
        if widget is None:
            raise ValueError("A host widget is required to create a DropTargetAdapter.")
        if not isinstance(widget, QWidget):
            raise TypeError(f"Host widget must be a QWidget, got {type(widget).__name__}.")
        for name, callback in (
            ("on_file_drop", on_file_drop),
            ("on_folder_drop", on_folder_drop),
            ("on_text_drop", on_text_drop),
        ):
            if callback is not None and not callable(callback):
                raise TypeError(f"{name} must be callable or None, got {type(callback).__name__}.")

        super().__init__(widget)
        self._widget: QWidget = widget
        self._on_file_drop: Optional[DropCallback] = on_file_drop
        self._on_folder_drop: Optional[DropCallback] = on_folder_drop
        self._on_text_drop: Optional[DropCallback] = on_text_drop
        self._debug: bool = debug_enabled() if debug is None else debug

        widget.setAcceptDrops(True)
        widget.installEventFilter(self)

    @property
    def widget(self) -> QWidget:
        return self._widget

    @property
    def on_file_drop(self) -> Optional[DropCallback]:
        return self._on_file_drop

    @property
    def on_folder_drop(self) -> Optional[DropCallback]:
        return self._on_folder_drop

    @property
    def on_text_drop(self) -> Optional[DropCallback]:
        return self._on_text_drop

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """Routes the host widget's drag/drop events to the handlers below."""
        if watched is not self._widget:
            return False

        event_type = event.type()
        if event_type == QEvent.Type.DragEnter:
            self.drag_enter(event)
            return True
        if event_type == QEvent.Type.DragMove:
            self.drag_over(event)
            return True
        if event_type == QEvent.Type.Drop:
            self.drop(event)
            return True
        return False

    def drag_enter(self, event: QDragEnterEvent) -> None:
        """Accepts the drag as a copy if it advertises paths or plain text."""
        mime_data = event.mimeData()
        if mime_data.hasUrls() or mime_data.hasText():
            self._trace("Drag Enter Accepted")
            self._accept_copy(event)
        else:
            self._trace(f"Drag Enter Rejected - formats: {mime_data.formats()}")
            event.ignore()

    def drag_over(self, event: QDragMoveEvent) -> None:
        """Keeps the copy cursor while hovering, whatever the payload."""
        # Looser than drag_enter on purpose; drag_enter makes the real decision.
        self._accept_copy(event)

    def drop(self, event: QDropEvent) -> None:
        """Classifies the dropped payload and invokes the matching callback."""
        mime_data = event.mimeData()

        if mime_data.hasUrls():
            self._accept_copy(event)
            for path in local_paths(mime_data.urls()):
                kind = classify_path(path)
                if kind is PathKind.DIRECTORY:
                    self._trace(f"Folder dropped: {path}")
                    if self._on_folder_drop is not None:
                        self._on_folder_drop(path)
                elif kind is PathKind.FILE:
                    self._trace(f"File dropped: {path}")
                    if self._on_file_drop is not None:
                        self._on_file_drop(path)
                else:
                    self._trace(f"Skipping missing path: {path!r}")
        elif mime_data.hasText():
            self._accept_copy(event)
            text = mime_data.text()
            self._trace(f"Text dropped ({len(text)} chars)")
            if self._on_text_drop is not None:
                self._on_text_drop(text)
        else:
            self._trace("Drop Ignored - no path or text payload")

    @staticmethod
    def _accept_copy(event: QDropEvent) -> None:
        event.setDropAction(Qt.DropAction.CopyAction)
        event.accept()

    def _trace(self, message: str) -> None:
        if self._debug:
            print(f"DropTargetAdapter: {message}")
