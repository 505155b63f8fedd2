from __future__ import annotations


class JsonTablesError(Exception):
    """Base class for every failure raised by the store."""

    http_status = 500

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class PathNotFoundError(JsonTablesError):
    http_status = 404


class PathExistsError(JsonTablesError):
    http_status = 409


class StorageIOError(JsonTablesError):
    pass


class ParseError(JsonTablesError):
    """Content present but not valid JSON, or not an object of objects."""

    http_status = 422


class NoDocumentError(JsonTablesError):
    http_status = 409


class TableNotFoundError(JsonTablesError):
    http_status = 404


class TableExistsError(JsonTablesError):
    http_status = 409


class RecordNotFoundError(JsonTablesError):
    http_status = 404


class KeyNotFoundError(JsonTablesError):
    http_status = 404


class FieldExistsError(JsonTablesError):
    http_status = 409


class PersistError(JsonTablesError):
    """
    The document serialized but the file write failed.

    The in-memory document is NOT rolled back; it may be ahead of disk.
    """


class CreationError(JsonTablesError):
    pass
