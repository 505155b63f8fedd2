from __future__ import annotations

from .document import Document, DocumentState, Empty, Loaded
from .errors import (
    CreationError,
    FieldExistsError,
    JsonTablesError,
    KeyNotFoundError,
    NoDocumentError,
    ParseError,
    PathExistsError,
    PathNotFoundError,
    PersistError,
    RecordNotFoundError,
    StorageIOError,
    TableExistsError,
    TableNotFoundError,
)
from .file_channel import FileChannel
from .records import to_record
from .repositories import AsyncDocumentStore
from .store import DEFAULT_DOCUMENT, DocumentStore
from .table import Table

__all__ = [
    "DocumentStore",
    "AsyncDocumentStore",
    "DEFAULT_DOCUMENT",
    "Table",
    "FileChannel",
    "Document",
    "DocumentState",
    "Empty",
    "Loaded",
    "to_record",
    "JsonTablesError",
    "PathNotFoundError",
    "PathExistsError",
    "StorageIOError",
    "ParseError",
    "NoDocumentError",
    "TableNotFoundError",
    "TableExistsError",
    "RecordNotFoundError",
    "KeyNotFoundError",
    "FieldExistsError",
    "PersistError",
    "CreationError",
]
