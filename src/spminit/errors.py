"""Exception types raised while initialising a package."""

from __future__ import annotations

from pathlib import Path


class InitError(RuntimeError):
    """Raised when a package cannot be initialised."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ManifestAlreadyExists(InitError):
    """The destination already contains a package manifest."""

    def __init__(self, path: Path | str) -> None:
        super().__init__("a manifest file already exists in this directory")
        self.path = Path(path)


class InvariantViolation(AssertionError):
    """A programming contract was broken; not meant to be recovered from."""


__all__ = ["InitError", "InvariantViolation", "ManifestAlreadyExists"]
