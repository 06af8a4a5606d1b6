"""Read-through overlay used for dry runs."""

from __future__ import annotations

import errno
import os
from pathlib import Path, PurePosixPath

from ..interfaces import FileSystem
from .local import LocalFileSystem
from .memory import _key


class OverlayFileSystem(FileSystem):
    """Answer reads from ``base`` while keeping every write in memory.

    The underlying filesystem is never modified, so an initializer running
    against an overlay sees existing files exactly as a real run would.
    """

    def __init__(self, base: FileSystem | None = None) -> None:
        self._base = base or LocalFileSystem()
        self._files: dict[PurePosixPath, str] = {}
        self._directories: set[PurePosixPath] = set()

    @property
    def files(self) -> dict[str, str]:
        """Return a copy of the files written through the overlay."""

        return {str(path): content for path, content in self._files.items()}

    def exists(self, path: Path) -> bool:
        key = _key(path)
        return key in self._files or key in self._directories or self._base.exists(Path(key))

    def is_directory(self, path: Path) -> bool:
        key = _key(path)
        if key in self._files:
            return False
        return key in self._directories or self._base.is_directory(Path(key))

    def create_directories(self, path: Path) -> None:
        key = _key(path)
        for candidate in (*reversed(key.parents), key):
            if self.is_directory(candidate):
                continue
            if self.exists(candidate):
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(candidate))
            self._directories.add(candidate)

    def write_file(self, path: Path, content: str) -> None:
        key = _key(path)
        if not self.is_directory(key.parent):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(key))
        if self.is_directory(key):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(key))
        self._files[key] = content

    def read_file(self, path: Path) -> str:
        key = _key(path)
        if key in self._files:
            return self._files[key]
        return self._base.read_file(Path(key))


__all__ = ["OverlayFileSystem"]
