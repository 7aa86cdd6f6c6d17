"""Shared fixtures for building Qt drag/drop events in tests."""

import os
from typing import Callable, Iterable, Optional

# Must be set before the QApplication is created by pytest-qt
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QByteArray, QEvent, QMimeData, QPoint, QPointF, Qt, QUrl
from PySide6.QtGui import QDragEnterEvent, QDragMoveEvent, QDropEvent
from PySide6.QtWidgets import QWidget

PROPOSED_ACTIONS = Qt.DropAction.CopyAction | Qt.DropAction.MoveAction


@pytest.fixture
def host_widget(qtbot) -> QWidget:
    """A plain QWidget to attach adapters to, cleaned up by qtbot."""
    widget = QWidget()
    qtbot.addWidget(widget)
    return widget


@pytest.fixture
def make_mime() -> Callable[..., QMimeData]:
    """Factory for QMimeData payloads.

    paths become file:// URLs, raw_urls are used as-is, custom_format adds
    an opaque application format.
    """
    def _make(
        paths: Optional[Iterable[str]] = None,
        raw_urls: Optional[Iterable[str]] = None,
        text: Optional[str] = None,
        custom_format: Optional[str] = None
    ) -> QMimeData:
        mime = QMimeData()
        urls = []
        if paths is not None:
            urls.extend(QUrl.fromLocalFile(str(p)) for p in paths)
        if raw_urls is not None:
            urls.extend(QUrl(u) for u in raw_urls)
        if urls:
            mime.setUrls(urls)
        if text is not None:
            mime.setText(text)
        if custom_format is not None:
            mime.setData(custom_format, QByteArray(b"opaque payload"))
        return mime
    return _make


@pytest.fixture
def make_event() -> Callable[[QEvent.Type, QMimeData], QDropEvent]:
    """Factory for drag-enter, drag-move and drop events over a payload."""
    def _make(event_type: QEvent.Type, mime: QMimeData) -> QDropEvent:
        buttons = Qt.MouseButton.LeftButton
        modifiers = Qt.KeyboardModifier.NoModifier
        if event_type == QEvent.Type.DragEnter:
            return QDragEnterEvent(QPoint(5, 5), PROPOSED_ACTIONS, mime, buttons, modifiers)
        if event_type == QEvent.Type.DragMove:
            return QDragMoveEvent(QPoint(5, 5), PROPOSED_ACTIONS, mime, buttons, modifiers)
        if event_type == QEvent.Type.Drop:
            return QDropEvent(QPointF(5, 5), PROPOSED_ACTIONS, mime, buttons, modifiers)
        raise ValueError(f"Unsupported event type: {event_type}")
    return _make
