"""Ordered file emission plans for each package kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Callable, Iterator

from .config import PackageIdentity
from .errors import InvariantViolation
from .io.interfaces import FileSystem
from .kinds import PackageKind
from .template import TemplateRenderer
from .tools_version import DEFAULT_TOOLS_VERSION, MANIFEST_FILENAME, ToolsVersion, write_tools_version

__all__ = [
    "EmissionStep",
    "ExistsPolicy",
    "plan_for",
    "source_filename",
    "source_template",
]


LOGGER = logging.getLogger(__name__)

ContentGenerator = Callable[[PackageIdentity], str]
AfterWrite = Callable[[FileSystem, Path], None]


MANIFEST_TEMPLATE = """
import PackageDescription

let package = Package(
    name: {{ package_name|quote }}
)
"""

README_TEMPLATE = """# {{ package_name }}

A description of this package.
"""

GITIGNORE_TEMPLATE = """.DS_Store
/.build
/Packages
/*.xcodeproj
"""

LIBRARY_SOURCE_TEMPLATE = """struct {{ type_name }} {

    var text = "Hello, World!"
}
"""

EXECUTABLE_SOURCE_TEMPLATE = """print("Hello, world!")
"""

MODULEMAP_TEMPLATE = """module {{ module_name }} [system] {
  header "/usr/include/{{ module_name }}.h"
  link "{{ module_name }}"
  export *
}
"""

LINUX_MAIN_TEMPLATE = """import XCTest
@testable import {{ module_name }}Tests

XCTMain([
    testCase({{ type_name }}Tests.allTests),
])
"""

TEST_STUB_TEMPLATE = """import XCTest
@testable import {{ module_name }}

class {{ module_name }}Tests: XCTestCase {
    func testExample() {
        // This is an example of a functional test case.
        // Use XCTAssert and related functions to verify your tests produce the correct
        // results.
        XCTAssertEqual({{ type_name }}().text, "Hello, World!")
    }


    static var allTests = [
        ("testExample", testExample),
    ]
}
"""

_RENDERER = TemplateRenderer()


class ExistsPolicy(str, Enum):
    """What to do when a step's target is already present."""

    FAIL_IF_EXISTS = "fail-if-exists"
    SKIP_IF_EXISTS = "skip-if-exists"


@dataclass(frozen=True, slots=True)
class EmissionStep:
    """A single file or directory to create relative to the destination.

    Directory steps have no ``generate`` callable and may own ``children``;
    when a directory is skipped because it exists, its children are skipped
    with it.
    """

    relative_path: PurePosixPath
    generate: ContentGenerator | None = None
    exists_policy: ExistsPolicy = ExistsPolicy.SKIP_IF_EXISTS
    children: tuple["EmissionStep", ...] = ()
    after_write: AfterWrite | None = None

    def __post_init__(self) -> None:
        if self.generate is not None and self.children:
            raise InvariantViolation(f"file step {self.relative_path} cannot have children")

    @property
    def is_directory(self) -> bool:
        return self.generate is None

    @property
    def display_path(self) -> str:
        """Relative path as shown in progress messages; directories end in ``/``."""

        text = self.relative_path.as_posix()
        return f"{text}/" if self.is_directory else text

    def walk(self) -> Iterator["EmissionStep"]:
        """Yield this step followed by its descendants, depth first."""

        yield self
        for child in self.children:
            yield from child.walk()


def _rendered(template: str) -> ContentGenerator:
    def generate(identity: PackageIdentity) -> str:
        return _RENDERER.render_string(template, identity.context())

    return generate


def _file(path: PurePosixPath, template: str) -> EmissionStep:
    return EmissionStep(relative_path=path, generate=_rendered(template))


def source_template(kind: PackageKind) -> str:
    """Return the source stub template for ``kind``.

    Only libraries and executables have sources; any other kind reaching
    this function means the plan builder is broken.
    """

    if kind is PackageKind.LIBRARY:
        return LIBRARY_SOURCE_TEMPLATE
    if kind is PackageKind.EXECUTABLE:
        return EXECUTABLE_SOURCE_TEMPLATE
    raise InvariantViolation(f"{kind} packages have no source stub")


def source_filename(kind: PackageKind, identity: PackageIdentity) -> str:
    if kind is PackageKind.EXECUTABLE:
        return "main.swift"
    if kind is PackageKind.LIBRARY:
        return f"{identity.type_name}.swift"
    raise InvariantViolation(f"{kind} packages have no source stub")


def _manifest_step(tools_version: ToolsVersion) -> EmissionStep:
    # Patch is zeroed so generated packages do not require a specific patch release.
    version = tools_version.zeroed_patch()

    def stamp(fs: FileSystem, manifest: Path) -> None:
        write_tools_version(manifest.parent, version, fs)

    return EmissionStep(
        relative_path=PurePosixPath(MANIFEST_FILENAME),
        generate=_rendered(MANIFEST_TEMPLATE),
        exists_policy=ExistsPolicy.FAIL_IF_EXISTS,
        after_write=stamp,
    )


def _sources_step(kind: PackageKind, identity: PackageIdentity) -> EmissionStep:
    sources = PurePosixPath("Sources")
    stub = _file(sources / source_filename(kind, identity), source_template(kind))
    return EmissionStep(relative_path=sources, children=(stub,))


def _tests_step(kind: PackageKind, identity: PackageIdentity) -> EmissionStep:
    tests = PurePosixPath("Tests")
    children: tuple[EmissionStep, ...] = ()

    # Only libraries are testable for now.
    if kind is PackageKind.LIBRARY:
        test_module = tests / identity.test_module_name
        children = (
            _file(tests / "LinuxMain.swift", LINUX_MAIN_TEMPLATE),
            EmissionStep(
                relative_path=test_module,
                children=(_file(test_module / f"{identity.module_name}Tests.swift", TEST_STUB_TEMPLATE),),
            ),
        )

    return EmissionStep(relative_path=tests, children=children)


def plan_for(
    kind: PackageKind,
    identity: PackageIdentity,
    *,
    tools_version: ToolsVersion = DEFAULT_TOOLS_VERSION,
) -> tuple[EmissionStep, ...]:
    """Return the ordered top level steps that scaffold a ``kind`` package."""

    steps: list[EmissionStep] = [
        _manifest_step(tools_version),
        _file(PurePosixPath("README.md"), README_TEMPLATE),
        _file(PurePosixPath(".gitignore"), GITIGNORE_TEMPLATE),
    ]

    if kind in (PackageKind.LIBRARY, PackageKind.EXECUTABLE):
        steps.append(_sources_step(kind, identity))

    if kind is PackageKind.SYSTEM_MODULE:
        steps.append(_file(PurePosixPath("module.modulemap"), MODULEMAP_TEMPLATE))

    if kind in (PackageKind.LIBRARY, PackageKind.EXECUTABLE):
        steps.append(_tests_step(kind, identity))

    LOGGER.debug(
        "Planned %d steps for %s package %s",
        sum(1 for step in steps for _ in step.walk()),
        kind,
        identity.package_name,
    )
    return tuple(steps)
