"""Package kinds supported by the initializer."""

from __future__ import annotations

from enum import Enum

__all__ = ["PackageKind"]


class PackageKind(str, Enum):
    """Closed set of package scaffolds."""

    EMPTY = "empty"
    LIBRARY = "library"
    EXECUTABLE = "executable"
    SYSTEM_MODULE = "system-module"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "PackageKind":
        """Return the kind named by ``text``.

        Accepts the display string as well as the camelCase ``systemModule``
        spelling used by older tooling.
        """

        normalized = text.strip()
        if normalized == "systemModule":
            return cls.SYSTEM_MODULE
        try:
            return cls(normalized.lower())
        except ValueError as exc:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"unknown package type '{text}' (expected one of: {choices})") from exc
