"""Local disk filesystem adapter."""

from __future__ import annotations

from pathlib import Path

from ..interfaces import FileSystem


class LocalFileSystem(FileSystem):
    """Read and write package files on the local disk as UTF-8 text."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def create_directories(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_file(self, path: Path, content: str) -> None:
        # newline="" keeps "\n" line endings on every platform.
        with Path(path).open("w", encoding=self._encoding, newline="") as handle:
            handle.write(content)

    def read_file(self, path: Path) -> str:
        with Path(path).open("r", encoding=self._encoding, newline="") as handle:
            return handle.read()


__all__ = ["LocalFileSystem"]
