"""Swift tools-version stamp stored on the first line of the manifest."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .io.interfaces import FileSystem

__all__ = [
    "DEFAULT_TOOLS_VERSION",
    "MANIFEST_FILENAME",
    "TOOLS_VERSION_PREFIX",
    "ToolsVersion",
    "write_tools_version",
]


LOGGER = logging.getLogger(__name__)

MANIFEST_FILENAME = "Package.swift"
TOOLS_VERSION_PREFIX = "// swift-tools-version:"

_VERSION_PATTERN = re.compile(r"(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?")


class ToolsVersion(BaseModel):
    """Version of the package description format a manifest targets."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    major: int = Field(..., ge=0, description="Major component.")
    minor: int = Field(0, ge=0, description="Minor component.")
    patch: int = Field(0, ge=0, description="Patch component.")

    @classmethod
    def parse(cls, text: str) -> "ToolsVersion":
        """Parse ``MAJOR.MINOR`` or ``MAJOR.MINOR.PATCH``."""

        match = _VERSION_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"invalid tools version '{text}'")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch") or 0),
        )

    def zeroed_patch(self) -> "ToolsVersion":
        return self.model_copy(update={"patch": 0})

    def __str__(self) -> str:
        if self.patch == 0:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"


DEFAULT_TOOLS_VERSION = ToolsVersion(major=4, minor=0, patch=0)


def _strip_existing_stamp(contents: str) -> str:
    first_line, newline, rest = contents.partition("\n")
    if first_line.startswith(TOOLS_VERSION_PREFIX):
        return rest
    return contents


def write_tools_version(directory: Path, version: ToolsVersion, fs: FileSystem) -> Path:
    """Stamp ``version`` onto the manifest stored in ``directory``.

    Any stamp already present on the first line is replaced. The manifest
    must exist.
    """

    manifest = Path(directory) / MANIFEST_FILENAME
    contents = fs.read_file(manifest)
    stamped = f"{TOOLS_VERSION_PREFIX}{version}\n{_strip_existing_stamp(contents)}"
    fs.write_file(manifest, stamped)
    LOGGER.debug("Stamped tools version %s onto %s", version, manifest)
    return manifest
