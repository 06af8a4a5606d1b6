"""Abstract interfaces for the collaborators used by the initializer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

ProgressReporter = Callable[[str], None]


class FileSystem(ABC):
    """Minimal filesystem surface needed to emit a package skeleton."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return ``True`` when a file or directory exists at ``path``."""

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Return ``True`` when ``path`` is an existing directory."""

    @abstractmethod
    def create_directories(self, path: Path) -> None:
        """Create ``path`` and any missing parents.

        Creating a directory that already exists is not an error.
        """

    @abstractmethod
    def write_file(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path``, replacing any previous contents."""

    @abstractmethod
    def read_file(self, path: Path) -> str:
        """Return the text stored at ``path``."""


__all__ = ["FileSystem", "ProgressReporter"]
