from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from spminit.io.adapters.memory import InMemoryFileSystem  # noqa: E402


@pytest.fixture()
def memory_fs() -> InMemoryFileSystem:
    return InMemoryFileSystem()


@pytest.fixture()
def messages() -> list[str]:
    """Collects progress messages emitted by an initializer."""

    return []
