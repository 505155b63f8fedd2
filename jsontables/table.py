from __future__ import annotations

import copy
from typing import Any, Iterator

from .errors import KeyNotFoundError, RecordNotFoundError
from .json_store import dump_json


class Table:
    """
    A view over one table inside a loaded document.

    The table content looks like:
      {
        "1": { "field": value, ... },
        "2": { ... }
      }

    Ids are decimal integers stored as strings. The view holds a live reference into the
    store's document, so it must not be kept beyond a single store operation. It never
    persists anything itself.
    """

    def __init__(self, name: str, content: dict[str, Any]):
        self._name = name
        self._content = content

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str | int) -> Any:
        """Return the value stored under key; a stored JSON null comes back as None."""
        k = str(key)
        if k not in self._content:
            raise KeyNotFoundError(f"No key {k!r} in table {self._name!r}")
        return self._content[k]

    def record(self, record_id: str | int) -> dict[str, Any]:
        rec = self._content.get(str(record_id))
        if not isinstance(rec, dict):
            raise RecordNotFoundError(f"No record with id {record_id} in table {self._name!r}")
        return rec

    def allocate(self) -> int:
        # Every key is expected to be a decimal integer string.
        return max((int(k) for k in self._content), default=0) + 1

    def append(self, record: dict[str, Any]) -> str:
        record_id = str(self.allocate())
        self._content[record_id] = record
        return record_id

    def remove(self, key: str | int) -> None:
        k = str(key)
        if k not in self._content:
            raise KeyNotFoundError(f"No item found with key {k!r} in table {self._name!r}")
        del self._content[k]

    def keys(self) -> list[str]:
        return list(self._content)

    def to_dict(self) -> dict[str, Any]:
        """Detached deep copy of the table content."""
        return copy.deepcopy(self._content)

    def __contains__(self, key: object) -> bool:
        return str(key) in self._content

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[str]:
        return iter(self._content)

    def __str__(self) -> str:
        return dump_json(self._content)
