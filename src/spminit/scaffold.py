"""Package initialisation driver."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from .config import PackageIdentity
from .errors import InvariantViolation, ManifestAlreadyExists
from .io.adapters.local import LocalFileSystem
from .io.interfaces import FileSystem, ProgressReporter
from .io.schema import InitReport
from .kinds import PackageKind
from .plan import EmissionStep, ExistsPolicy, plan_for
from .tools_version import DEFAULT_TOOLS_VERSION, ToolsVersion

__all__ = ["InitState", "PackageInitializer"]


LOGGER = logging.getLogger(__name__)


class InitState(str, Enum):
    """Lifecycle of a :class:`PackageInitializer`. Transitions only move forward."""

    NOT_STARTED = "not-started"
    DERIVING_IDENTITY = "deriving-identity"
    EMITTING = "emitting"
    FAILED = "failed"
    COMPLETED = "completed"


def _ignore_progress(message: str) -> None:
    return None


class PackageInitializer:
    """Create a template package of ``kind`` inside ``destination``.

    Parameters
    ----------
    destination:
        Directory that receives the package. Its basename becomes the
        package name and must not be empty.
    kind:
        The :class:`PackageKind` to scaffold.
    fs:
        Filesystem collaborator. Defaults to :class:`LocalFileSystem`.
    progress:
        Callable receiving human readable progress messages. Exceptions it
        raises are logged and otherwise ignored.
    tools_version:
        Version stamped onto the manifest, with its patch component zeroed.
    """

    def __init__(
        self,
        destination: str | Path,
        kind: PackageKind,
        *,
        fs: FileSystem | None = None,
        progress: ProgressReporter | None = None,
        tools_version: ToolsVersion | None = None,
    ) -> None:
        self.destination = Path(destination)
        self.kind = PackageKind(kind)
        self._fs = fs or LocalFileSystem()
        self._progress = progress or _ignore_progress
        self._tools_version = tools_version or DEFAULT_TOOLS_VERSION
        self.state = InitState.NOT_STARTED
        self.current_step: EmissionStep | None = None
        self.error: BaseException | None = None
        self.identity: PackageIdentity | None = None

    def _report(self, message: str) -> None:
        try:
            self._progress(message)
        except Exception:  # noqa: BLE001 - the sink must never abort a run
            LOGGER.warning("Progress reporter failed for message %r", message, exc_info=True)

    def write_package_structure(self) -> InitReport:
        """Write every file planned for :attr:`kind` and return a summary.

        Raises
        ------
        ManifestAlreadyExists
            The destination already holds a manifest. Nothing is written.
        OSError
            The filesystem rejected a write. Files emitted earlier in the run
            are left in place.
        """

        if self.state is not InitState.NOT_STARTED:
            raise InvariantViolation(f"initializer already ran (state: {self.state.value})")

        self.state = InitState.DERIVING_IDENTITY
        try:
            self.identity = PackageIdentity.from_destination(self.destination)
            self._report(f"Creating {self.kind} package: {self.identity.package_name}")

            plan = plan_for(self.kind, self.identity, tools_version=self._tools_version)
            created: list[str] = []
            skipped: list[str] = []

            self.state = InitState.EMITTING
            for step in plan:
                self._emit(step, created, skipped)
        except BaseException as exc:
            self.state = InitState.FAILED
            self.error = exc
            LOGGER.error("Aborted %s package at %s: %s", self.kind, self.destination, exc)
            raise

        self.current_step = None
        self.state = InitState.COMPLETED
        LOGGER.debug("Created %d paths, skipped %d under %s", len(created), len(skipped), self.destination)
        return InitReport(
            destination=str(self.destination),
            kind=self.kind,
            package_name=self.identity.package_name,
            module_name=self.identity.module_name,
            created=created,
            skipped=skipped,
        )

    def _emit(self, step: EmissionStep, created: list[str], skipped: list[str]) -> None:
        assert self.identity is not None
        self.current_step = step
        target = self.destination / step.relative_path

        if self._fs.exists(target):
            if step.exists_policy is ExistsPolicy.FAIL_IF_EXISTS:
                raise ManifestAlreadyExists(target)
            LOGGER.debug("Skipping existing %s", target)
            skipped.extend(descendant.display_path for descendant in step.walk())
            return

        self._report(f"Creating {step.display_path}")
        if step.is_directory:
            self._fs.create_directories(target)
        else:
            assert step.generate is not None
            self._fs.create_directories(target.parent)
            self._fs.write_file(target, step.generate(self.identity))
            if step.after_write is not None:
                step.after_write(self._fs, target)
        LOGGER.debug("Wrote %s", target)
        created.append(step.display_path)

        for child in step.children:
            self._emit(child, created, skipped)
