"""Scaffolding for new Swift packages.

The package derives a package name and a module identifier from a
destination directory, plans the skeleton files for the requested package
kind, and writes them through a pluggable filesystem adapter. It can be used
programmatically or through the ``spminit`` command line interface.
"""

from __future__ import annotations

from .config import InitSettings, PackageIdentity
from .errors import InitError, InvariantViolation, ManifestAlreadyExists
from .io.schema import InitReport
from .kinds import PackageKind
from .naming import mangle_identifier
from .plan import EmissionStep, ExistsPolicy, plan_for
from .scaffold import InitState, PackageInitializer
from .tools_version import DEFAULT_TOOLS_VERSION, ToolsVersion, write_tools_version

__all__ = [
    "DEFAULT_TOOLS_VERSION",
    "EmissionStep",
    "ExistsPolicy",
    "InitError",
    "InitReport",
    "InitSettings",
    "InitState",
    "InvariantViolation",
    "ManifestAlreadyExists",
    "PackageIdentity",
    "PackageInitializer",
    "PackageKind",
    "ToolsVersion",
    "mangle_identifier",
    "plan_for",
    "write_tools_version",
]

__version__ = "0.1.0"
