from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection,
# so `import jsontables`, `import app` and `import endpoints` work without an install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class MemoryChannel:
    """
    In-memory stand-in for FileChannel; can be told to fail writes.
    """

    def __init__(self, text: str | None = None, path: Path = Path("memory.json")) -> None:
        self.text = text
        self.fail_writes = False
        self.writes = 0
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str | None:
        return self.text

    def write(self, text: str) -> None:
        from jsontables.errors import StorageIOError

        if self.fail_writes:
            raise StorageIOError("disk full", cause=OSError(28, "No space left on device"))
        self.writes += 1
        self.text = text


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """A not-yet-existing database path under a not-yet-existing directory."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
def write_db(tmp_path: Path):
    """
    Write raw text to a fresh file and return its path.
    """

    def _write(text: str, name: str = "existing.json") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def memory_channel():
    return MemoryChannel
