from __future__ import annotations

import logging
from pathlib import Path

import pytest

from spminit.errors import InvariantViolation, ManifestAlreadyExists
from spminit.io.adapters.memory import InMemoryFileSystem
from spminit.kinds import PackageKind
from spminit.scaffold import InitState, PackageInitializer
from spminit.tools_version import ToolsVersion


def _tree(root: Path) -> set[str]:
    return {path.relative_to(root).as_posix() for path in root.rglob("*")}


def test_library_package_on_disk(tmp_path: Path, messages: list[str]):
    destination = tmp_path / "MyLib"
    initializer = PackageInitializer(destination, PackageKind.LIBRARY, progress=messages.append)

    report = initializer.write_package_structure()

    assert initializer.state is InitState.COMPLETED
    assert report.package_name == "MyLib"
    assert report.module_name == "MyLib"
    assert _tree(destination) == {
        "Package.swift",
        "README.md",
        ".gitignore",
        "Sources",
        "Sources/MyLib.swift",
        "Tests",
        "Tests/LinuxMain.swift",
        "Tests/MyLibTests",
        "Tests/MyLibTests/MyLibTests.swift",
    }
    assert (destination / "Package.swift").read_text(encoding="utf-8") == (
        "// swift-tools-version:4.0\n"
        "\n"
        "import PackageDescription\n"
        "\n"
        "let package = Package(\n"
        '    name: "MyLib"\n'
        ")\n"
    )
    assert 'var text = "Hello, World!"' in (destination / "Sources" / "MyLib.swift").read_text(encoding="utf-8")
    assert 'XCTAssertEqual(MyLib().text, "Hello, World!")' in (
        destination / "Tests" / "MyLibTests" / "MyLibTests.swift"
    ).read_text(encoding="utf-8")
    assert messages == [
        "Creating library package: MyLib",
        "Creating Package.swift",
        "Creating README.md",
        "Creating .gitignore",
        "Creating Sources/",
        "Creating Sources/MyLib.swift",
        "Creating Tests/",
        "Creating Tests/LinuxMain.swift",
        "Creating Tests/MyLibTests/",
        "Creating Tests/MyLibTests/MyLibTests.swift",
    ]
    assert report.created == [message.removeprefix("Creating ") for message in messages[1:]]
    assert report.skipped == []


def test_executable_package(tmp_path: Path):
    destination = tmp_path / "tool-1"
    report = PackageInitializer(destination, PackageKind.EXECUTABLE).write_package_structure()

    assert report.module_name == "tool_1"
    assert (destination / "Sources" / "main.swift").read_text(encoding="utf-8") == 'print("Hello, world!")\n'
    assert (destination / "Tests").is_dir()
    assert list((destination / "Tests").iterdir()) == []


def test_system_module_package(tmp_path: Path):
    destination = tmp_path / "CZlib"
    PackageInitializer(destination, PackageKind.SYSTEM_MODULE).write_package_structure()

    assert not (destination / "Sources").exists()
    assert not (destination / "Tests").exists()
    assert (destination / "module.modulemap").read_text(encoding="utf-8").startswith("module CZlib [system] {\n")


def test_empty_package(tmp_path: Path):
    destination = tmp_path / "Blank"
    PackageInitializer(destination, PackageKind.EMPTY).write_package_structure()

    assert _tree(destination) == {"Package.swift", "README.md", ".gitignore"}


@pytest.mark.parametrize("kind", list(PackageKind))
def test_second_run_fails_with_manifest_already_exists(tmp_path: Path, kind: PackageKind):
    destination = tmp_path / "Again"
    PackageInitializer(destination, kind).write_package_structure()
    before = {path: path.read_bytes() for path in destination.rglob("*") if path.is_file()}

    initializer = PackageInitializer(destination, kind)
    with pytest.raises(ManifestAlreadyExists) as excinfo:
        initializer.write_package_structure()

    assert str(excinfo.value) == "a manifest file already exists in this directory"
    assert excinfo.value.path == destination / "Package.swift"
    assert initializer.state is InitState.FAILED
    assert initializer.error is excinfo.value
    assert {path: path.read_bytes() for path in destination.rglob("*") if path.is_file()} == before


def test_existing_readme_is_left_untouched(tmp_path: Path, messages: list[str]):
    destination = tmp_path / "MyLib"
    destination.mkdir()
    (destination / "README.md").write_text("custom readme\n", encoding="utf-8")

    report = PackageInitializer(
        destination, PackageKind.LIBRARY, progress=messages.append
    ).write_package_structure()

    assert (destination / "README.md").read_text(encoding="utf-8") == "custom readme\n"
    assert (destination / "Package.swift").exists()
    assert (destination / ".gitignore").exists()
    assert (destination / "Sources" / "MyLib.swift").exists()
    assert "Creating README.md" not in messages
    assert report.skipped == ["README.md"]


def test_existing_sources_directory_skips_its_stub(tmp_path: Path):
    destination = tmp_path / "MyLib"
    (destination / "Sources").mkdir(parents=True)

    report = PackageInitializer(destination, PackageKind.LIBRARY).write_package_structure()

    assert list((destination / "Sources").iterdir()) == []
    assert report.skipped == ["Sources/", "Sources/MyLib.swift"]
    assert (destination / "Tests" / "MyLibTests" / "MyLibTests.swift").exists()


def test_tools_version_patch_is_zeroed(memory_fs: InMemoryFileSystem):
    PackageInitializer(
        Path("/work/MyLib"),
        PackageKind.EMPTY,
        fs=memory_fs,
        tools_version=ToolsVersion(major=5, minor=9, patch=2),
    ).write_package_structure()

    assert memory_fs.read_file(Path("/work/MyLib/Package.swift")).startswith("// swift-tools-version:5.9\n")


class _FailingFileSystem(InMemoryFileSystem):
    def __init__(self, failing_name: str) -> None:
        super().__init__()
        self._failing_name = failing_name

    def write_file(self, path: Path, content: str) -> None:
        if Path(path).name == self._failing_name:
            raise PermissionError(13, "Permission denied", str(path))
        super().write_file(path, content)


def test_filesystem_error_aborts_remaining_steps():
    fs = _FailingFileSystem(".gitignore")
    initializer = PackageInitializer(Path("/work/MyLib"), PackageKind.LIBRARY, fs=fs)

    with pytest.raises(PermissionError):
        initializer.write_package_structure()

    assert initializer.state is InitState.FAILED
    assert initializer.current_step is not None
    assert initializer.current_step.display_path == ".gitignore"
    assert set(fs.files) == {"/work/MyLib/Package.swift", "/work/MyLib/README.md"}
    assert not fs.exists(Path("/work/MyLib/Sources"))


def test_failing_manifest_stamp_fails_the_manifest_step():
    class _UnreadableFileSystem(InMemoryFileSystem):
        def read_file(self, path: Path) -> str:
            raise OSError(5, "Input/output error", str(path))

    fs = _UnreadableFileSystem()
    with pytest.raises(OSError):
        PackageInitializer(Path("/work/MyLib"), PackageKind.EMPTY, fs=fs).write_package_structure()

    assert not fs.exists(Path("/work/MyLib/README.md"))


def test_failing_progress_sink_is_ignored(memory_fs: InMemoryFileSystem):
    def broken_sink(message: str) -> None:
        raise RuntimeError("sink closed")

    report = PackageInitializer(
        Path("/work/MyLib"), PackageKind.EMPTY, fs=memory_fs, progress=broken_sink
    ).write_package_structure()

    assert report.created == ["Package.swift", "README.md", ".gitignore"]


def test_initializer_runs_only_once(memory_fs: InMemoryFileSystem):
    initializer = PackageInitializer(Path("/work/MyLib"), PackageKind.EMPTY, fs=memory_fs)
    initializer.write_package_structure()

    with pytest.raises(InvariantViolation):
        initializer.write_package_structure()


def test_empty_basename_is_an_invariant_violation(memory_fs: InMemoryFileSystem):
    initializer = PackageInitializer(Path("/"), PackageKind.EMPTY, fs=memory_fs)

    with pytest.raises(InvariantViolation):
        initializer.write_package_structure()

    assert initializer.state is InitState.FAILED
    assert memory_fs.files == {}


def test_abort_is_logged_as_error(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    destination = tmp_path / "MyLib"
    PackageInitializer(destination, PackageKind.EMPTY).write_package_structure()

    with caplog.at_level(logging.ERROR, logger="spminit.scaffold"):
        with pytest.raises(ManifestAlreadyExists):
            PackageInitializer(destination, PackageKind.EMPTY).write_package_structure()

    assert [record.levelno for record in caplog.records] == [logging.ERROR]
    assert "Aborted empty package" in caplog.records[0].getMessage()
