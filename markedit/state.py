"""Editor state: the open file, its contents and the document outline."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Union

StrPath = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class OutlineEntry:
    """One heading of a document outline."""

    title: str
    level: int
    line: int


class AppState:
    """Thread-safe holder of the editor's current document."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._current_file = ""
        self._current_content = ""
        self._original_content = ""
        self._outline: list[OutlineEntry] = []

    @property
    def current_file(self) -> str:
        with self._lock:
            return self._current_file

    @current_file.setter
    def current_file(self, file_path: str) -> None:
        with self._lock:
            self._current_file = file_path

    @property
    def current_content(self) -> str:
        with self._lock:
            return self._current_content

    @current_content.setter
    def current_content(self, content: str) -> None:
        with self._lock:
            self._current_content = content

    @property
    def original_content(self) -> str:
        with self._lock:
            return self._original_content

    @original_content.setter
    def original_content(self, content: str) -> None:
        with self._lock:
            self._original_content = content

    @property
    def outline(self) -> list[OutlineEntry]:
        """A copy of the outline, safe to modify."""
        with self._lock:
            return list(self._outline)

    @outline.setter
    def outline(self, entries: Iterable[OutlineEntry]) -> None:
        with self._lock:
            self._outline = list(entries)

    def has_unsaved_changes(self) -> bool:
        """Whether the current content differs from the last saved content."""
        with self._lock:
            return self._current_content != self._original_content

    def load_file(self, file_path: StrPath) -> str:
        """Return the text of a file; raises OSError if it cannot be read."""
        with open(file_path, encoding="utf-8", newline="") as handle:
            return handle.read()

    def save_file(self, file_path: StrPath, content: str) -> None:
        """Write content to a file exactly as given."""
        with open(file_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def reset(self) -> None:
        """Forget the current document."""
        with self._lock:
            self._current_file = ""
            self._current_content = ""
            self._original_content = ""
            self._outline = []