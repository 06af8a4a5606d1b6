"""Filesystem adapters shipped with spminit."""

from .local import LocalFileSystem
from .memory import InMemoryFileSystem
from .overlay import OverlayFileSystem

__all__ = ["InMemoryFileSystem", "LocalFileSystem", "OverlayFileSystem"]
