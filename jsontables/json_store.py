from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"Duplicate key {key!r}")
        obj[key] = value
    return obj


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant {name}")


def parse_json(text: str) -> Any:
    """
    Parse JSON text.

    Stricter than json.loads: duplicate object keys and NaN/Infinity are rejected.
    Raises ValueError (json.JSONDecodeError is a subclass) on bad input.
    """
    return json.loads(text, object_pairs_hook=_reject_duplicates, parse_constant=_reject_constant)


def dump_json(payload: Any, *, indent: int | None = None) -> str:
    """
    Serialize to JSON text, keeping insertion order.

    Compact separators unless indent is given.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(payload, indent=indent, separators=separators, ensure_ascii=False, allow_nan=False)


def read_text(path: Path) -> str | None:
    """
    Read the whole file as UTF-8.

    Returns None for a zero-length file, so an empty file is distinguishable from content.
    """
    raw = path.read_text(encoding="utf-8")
    if raw == "":
        return None
    return raw


def atomic_write_text(path: Path, text: str) -> None:
    """
    Atomically replace the file content by writing to a temp file then replacing.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if path.exists():
            os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
