from __future__ import annotations

import copy
import logging
import threading
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel

from .document import Document, DocumentState, Empty, load_state
from .errors import (
    CreationError,
    FieldExistsError,
    JsonTablesError,
    NoDocumentError,
    ParseError,
    PathNotFoundError,
    PersistError,
    StorageIOError,
    TableExistsError,
    TableNotFoundError,
)
from .file_channel import FileChannel
from .interfaces import TextChannel
from .records import normalize_value, to_record
from .table import Table

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = '{ "default": {} }'


class DocumentStore:
    """
    A JSON file exposed as a set of named tables.

    The whole file is loaded into memory. Every successful mutation rewrites the whole
    file before returning. Each mutation validates first, then changes memory, then
    persists; if the write fails a PersistError is raised and memory is left ahead of
    disk (call reload() to resync).

    Two stores opened on the same path do not see each other's changes: whichever
    writes last overwrites the file.
    """

    def __init__(self, channel: TextChannel, *, indent: int | None = None):
        self._channel = channel
        self._indent = indent
        self._lock = threading.RLock()
        self._state = self._read_state()

    @classmethod
    def open(cls, path: str | Path, *, indent: int | None = None) -> "DocumentStore":
        """Open an existing file. An empty file gives a store with no document."""
        return cls(FileChannel.open(path), indent=indent)

    @classmethod
    def create(cls, path: str | Path, *, indent: int | None = None) -> "DocumentStore":
        """Create a new file (and its parent directories) holding the default document."""
        try:
            channel = FileChannel.create(path)
        except JsonTablesError as e:
            raise CreationError("Could not create new file.", cause=e) from e
        try:
            channel.write(DEFAULT_DOCUMENT)
        except StorageIOError as e:
            raise CreationError("Could not write initial contents to file.", cause=e) from e
        logger.info("created document store at %s", channel.path)
        return cls(channel, indent=indent)

    @classmethod
    def open_or_create(cls, path: str | Path, *, indent: int | None = None) -> "DocumentStore":
        try:
            return cls.open(path, indent=indent)
        except PathNotFoundError:
            return cls.create(path, indent=indent)

    def _read_state(self) -> DocumentState:
        try:
            text = self._channel.read()
        except StorageIOError as e:
            raise ParseError(f"Could not read file: {self._channel.path}", cause=e) from e
        state = load_state(text)
        if isinstance(state, Empty):
            logger.debug("LOAD: %s is empty, no document", self._channel.path)
        else:
            logger.debug("LOAD: %s with %d tables", self._channel.path, len(state.document.root))
        return state

    def _document(self) -> Document:
        state = self._state
        if isinstance(state, Empty):
            raise NoDocumentError(f"No document loaded from {self._channel.path}")
        return state.document

    def _table(self, name: str) -> Table:
        content = self._document().root.get(name)
        if content is None:
            raise TableNotFoundError(f"Could not find table matching the name {name!r}")
        return Table(name, content)

    def _persist(self) -> None:
        text = self._document().to_text(indent=self._indent)
        try:
            self._channel.write(text)
        except StorageIOError as e:
            logger.warning("PERSIST: failed to write %s: %r", self._channel.path, e.cause)
            raise PersistError(f"Could not write to the file: {self._channel.path}", cause=e) from e
        logger.debug("PERSIST: wrote %d chars to %s", len(text), self._channel.path)

    @property
    def path(self) -> Path:
        return self._channel.path

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def is_empty(self) -> bool:
        return isinstance(self._state, Empty)

    def reload(self) -> None:
        """Discard the in-memory document and read the file again."""
        with self._lock:
            self._state = self._read_state()

    # --- queries ---

    def table_exists(self, name: str) -> bool:
        with self._lock:
            return name in self._document().root

    def table_names(self) -> list[str]:
        with self._lock:
            return list(self._document().root)

    def get_table(self, name: str) -> Table:
        """
        Return a view over the named table.

        The view references live data; use it within one operation and drop it.
        """
        with self._lock:
            return self._table(name)

    def get_record(self, table: str, record_id: str | int) -> dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._table(table).record(record_id))

    def table_content(self, name: str) -> dict[str, Any]:
        with self._lock:
            return self._table(name).to_dict()

    def snapshot(self) -> dict[str, dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._document().root)

    def to_string(self) -> str:
        with self._lock:
            return self._document().to_text(indent=self._indent)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._channel.path)!r}, empty={self.is_empty})"

    # --- mutations ---

    def new_table(self, name: str, initial_fields: Mapping[str, Any] | BaseModel | None = None) -> None:
        with self._lock:
            doc = self._document()
            if name in doc.root:
                raise TableExistsError(f"Table named {name!r} already exists.")
            normalize_value(name)
            content = {} if initial_fields is None else to_record(initial_fields)
            bad = [k for k in content if not k.isdecimal()]
            if bad:
                raise ParseError(f"Record ids must be decimal integers, got {bad!r}")
            doc.root[name] = content
            self._persist()
        logger.info("created table %r in %s", name, self._channel.path)

    def append(self, table: str, record: Mapping[str, Any] | BaseModel) -> str:
        """Append a record to the table and return its new id."""
        with self._lock:
            t = self._table(table)
            values = to_record(record)
            record_id = t.append(values)
            self._persist()
            return record_id

    def append_value(self, table: str, record_id: str | int, key: str, value: Any) -> None:
        """
        Add a new field to an existing record. Existing fields are never overwritten.
        """
        with self._lock:
            rec = self._table(table).record(record_id)
            if key in rec:
                raise FieldExistsError(f"A key with the name {key!r} already exists")
            rec[key] = to_record({key: value})[key]
            self._persist()

    def drop_table(self, name: str) -> None:
        with self._lock:
            doc = self._document()
            if name not in doc.root:
                raise TableNotFoundError(f"No table found with name {name!r}")
            del doc.root[name]
            self._persist()
        logger.info("dropped table %r from %s", name, self._channel.path)

    def delete(self, key: str | int, table: str) -> None:
        """Remove the item stored under key from the named table."""
        with self._lock:
            self._table(table).remove(key)
            self._persist()
