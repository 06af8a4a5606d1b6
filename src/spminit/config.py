"""Derived package identifiers and runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import InvariantViolation
from .naming import mangle_identifier
from .tools_version import DEFAULT_TOOLS_VERSION, ToolsVersion

__all__ = ["InitSettings", "PackageIdentity", "TEST_MODULE_SUFFIX"]


TEST_MODULE_SUFFIX = "Tests"

ENV_TOOLS_VERSION = "SPMINIT_TOOLS_VERSION"
ENV_LOG_LEVEL = "SPMINIT_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class PackageIdentity:
    """Names derived from the destination directory.

    Attributes
    ----------
    package_name:
        The destination basename, preserved verbatim. Used in human facing
        text such as the README heading and the manifest.
    module_name:
        :attr:`package_name` mangled into a valid identifier. Used for file
        names, module names and generated type names.
    """

    package_name: str
    module_name: str

    @classmethod
    def from_name(cls, name: str) -> "PackageIdentity":
        if not name:
            raise InvariantViolation("package name must not be empty")
        return cls(package_name=name, module_name=mangle_identifier(name))

    @classmethod
    def from_destination(cls, destination: str | Path) -> "PackageIdentity":
        """Build the identity from the basename of ``destination``."""

        return cls.from_name(Path(destination).name)

    @property
    def type_name(self) -> str:
        return self.module_name

    @property
    def test_module_name(self) -> str:
        return f"{self.package_name}{TEST_MODULE_SUFFIX}"

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "package_name": self.package_name,
            "module_name": self.module_name,
            "type_name": self.type_name,
            "test_module_name": self.test_module_name,
        }


@dataclass(slots=True)
class InitSettings:
    """Settings shared by the command line interface and the initializer.

    Attributes
    ----------
    tools_version:
        Version stamped onto generated manifests. The patch component is
        always zeroed so new packages do not pin a specific patch release.
    log_level:
        Name of the :mod:`logging` level used by the command line interface.
    """

    tools_version: ToolsVersion = DEFAULT_TOOLS_VERSION
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.tools_version = self.tools_version.zeroed_patch()
        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{self.log_level}'")
        self.log_level = level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "InitSettings":
        """Read overrides from ``SPMINIT_TOOLS_VERSION`` and ``SPMINIT_LOG_LEVEL``."""

        env = os.environ if environ is None else environ
        tools_version = DEFAULT_TOOLS_VERSION
        raw_version = env.get(ENV_TOOLS_VERSION, "").strip()
        if raw_version:
            tools_version = ToolsVersion.parse(raw_version)
        log_level = env.get(ENV_LOG_LEVEL, "").strip() or "WARNING"
        return cls(tools_version=tools_version, log_level=log_level)
