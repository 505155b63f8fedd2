from __future__ import annotations

import logging
import threading
from pathlib import Path

from .errors import PathExistsError, PathNotFoundError, StorageIOError
from .interfaces import TextChannel
from .json_store import atomic_write_text, read_text

logger = logging.getLogger(__name__)


class FileChannel(TextChannel):
    """
    Whole-file read/overwrite access to a single path.

    - Reads and writes through one channel are mutually exclusive (per channel, not per path).
    - Writes replace the file atomically; readers never see partial content.
    - Two channels on the same path do not coordinate with each other.
    """

    def __init__(self, path: Path):
        self._path = path
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: str | Path) -> "FileChannel":
        p = Path(path)
        if not p.exists():
            raise PathNotFoundError(f"File does not exist: {p}")
        return cls(p)

    @classmethod
    def create(cls, path: str | Path) -> "FileChannel":
        """
        Create an empty file at path, creating missing parent directories first.

        Parent directories are left in place if creating the file itself fails.
        """
        p = Path(path)
        if p.exists():
            raise PathExistsError(f"File at path {p} already exists")
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Could not create parent directories for {p}", cause=e) from e
        try:
            p.touch(exist_ok=False)
        except FileExistsError as e:
            raise PathExistsError(f"File at path {p} already exists", cause=e) from e
        except OSError as e:
            raise StorageIOError(f"Could not create file {p}", cause=e) from e
        logger.debug("created %s", p)
        return cls(p)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str | None:
        with self._lock:
            try:
                return read_text(self._path)
            except (OSError, UnicodeDecodeError) as e:
                raise StorageIOError(f"Could not read {self._path}", cause=e) from e

    def write(self, text: str) -> None:
        with self._lock:
            try:
                atomic_write_text(self._path, text)
            except (OSError, UnicodeEncodeError) as e:
                raise StorageIOError(f"Could not write {self._path}", cause=e) from e
