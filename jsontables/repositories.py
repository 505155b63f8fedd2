from __future__ import annotations

import asyncio
from typing import Any, Mapping

from pydantic import BaseModel

from .store import DocumentStore


class AsyncDocumentStore:
    """
    Async wrapper around a DocumentStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> DocumentStore:
        return self._store

    async def table_exists(self, name: str) -> bool:
        return await asyncio.to_thread(self._store.table_exists, name)

    async def table_names(self) -> list[str]:
        return await asyncio.to_thread(self._store.table_names)

    async def get_record(self, table: str, record_id: str | int) -> dict[str, Any]:
        return await asyncio.to_thread(self._store.get_record, table, record_id)

    async def table_content(self, table: str) -> dict[str, Any]:
        return await asyncio.to_thread(self._store.table_content, table)

    async def snapshot(self) -> dict[str, dict[str, Any]]:
        return await asyncio.to_thread(self._store.snapshot)

    async def new_table(self, name: str, initial_fields: Mapping[str, Any] | BaseModel | None = None) -> None:
        await asyncio.to_thread(self._store.new_table, name, initial_fields)

    async def append(self, table: str, record: Mapping[str, Any] | BaseModel) -> str:
        return await asyncio.to_thread(self._store.append, table, record)

    async def append_value(self, table: str, record_id: str | int, key: str, value: Any) -> None:
        await asyncio.to_thread(self._store.append_value, table, record_id, key, value)

    async def drop_table(self, name: str) -> None:
        await asyncio.to_thread(self._store.drop_table, name)

    async def delete(self, key: str | int, table: str) -> None:
        await asyncio.to_thread(self._store.delete, key, table)

    async def reload(self) -> None:
        await asyncio.to_thread(self._store.reload)
