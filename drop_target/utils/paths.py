"""Helpers for turning dropped URLs into local paths and classifying them."""

import enum
import os
from typing import Iterable, List

from PySide6.QtCore import QDir, QUrl


class PathKind(enum.Enum):
    """What a dropped path points at, at the moment it is checked."""
    DIRECTORY = "directory"
    FILE = "file"
    MISSING = "missing"


def classify_path(path: str) -> PathKind:
    """Classifies a path as an existing directory, regular file, or neither.

    Directories are checked first. Anything that is neither an existing
    directory nor a regular file (an empty string, a path deleted since the
    drag started, a device node, a broken symlink) is reported as MISSING.

    Args:
        path: The filesystem path to inspect.

    Returns:
        The PathKind for the path.
    """
    if not path:
        return PathKind.MISSING
    if os.path.isdir(path):
        return PathKind.DIRECTORY
    if os.path.isfile(path):
        return PathKind.FILE
    return PathKind.MISSING


def local_paths(urls: Iterable[QUrl]) -> List[str]:
    """Converts dropped URLs into local path strings with native separators.

    The result has one entry per URL, in the same order. URLs that do not
    refer to a local file (e.g. http links) map to an empty string.
    """
    return [QDir.toNativeSeparators(url.toLocalFile()) for url in urls]
