"""I/O interfaces and schemas for spminit."""

from .interfaces import FileSystem, ProgressReporter
from .schema import InitReport

__all__ = [
    "FileSystem",
    "InitReport",
    "ProgressReporter",
]
