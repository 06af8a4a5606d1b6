"""In-memory filesystem adapter for tests and dry runs."""

from __future__ import annotations

import errno
import os
from pathlib import Path, PurePosixPath

from ..interfaces import FileSystem


def _key(path: Path | str) -> PurePosixPath:
    return PurePosixPath(Path(path).as_posix())


class InMemoryFileSystem(FileSystem):
    """Keep files and directories in dictionaries instead of on disk.

    Parent directories must exist before a file can be written, mirroring the
    behaviour of a real filesystem, so tests exercise the same ordering the
    initializer relies on. The root of every path is implicitly present.
    """

    def __init__(self) -> None:
        self._files: dict[PurePosixPath, str] = {}
        self._directories: set[PurePosixPath] = set()

    @property
    def files(self) -> dict[str, str]:
        """Return a copy of stored files keyed by POSIX path."""

        return {str(path): content for path, content in self._files.items()}

    @property
    def directories(self) -> tuple[str, ...]:
        return tuple(sorted(str(path) for path in self._directories))

    def _is_root(self, key: PurePosixPath) -> bool:
        return key == key.parent

    def exists(self, path: Path) -> bool:
        key = _key(path)
        return key in self._files or self.is_directory(path)

    def is_directory(self, path: Path) -> bool:
        key = _key(path)
        return self._is_root(key) or key in self._directories

    def create_directories(self, path: Path) -> None:
        key = _key(path)
        for candidate in (*reversed(key.parents), key):
            if self._is_root(candidate):
                continue
            if candidate in self._files:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(candidate))
            self._directories.add(candidate)

    def write_file(self, path: Path, content: str) -> None:
        key = _key(path)
        if not self.is_directory(key.parent):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(key))
        if key in self._directories:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(key))
        self._files[key] = content

    def read_file(self, path: Path) -> str:
        key = _key(path)
        try:
            return self._files[key]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(key)) from None


__all__ = ["InMemoryFileSystem"]
