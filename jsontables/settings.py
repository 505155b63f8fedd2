from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .paths import resolve_db_path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    # Storage
    db_path: Path
    indent: int | None

    # Open the file if present, otherwise create it with the default document.
    create_missing: bool

    # Debug
    debug_log_requests: bool


def get_settings() -> Settings:
    db_path = resolve_db_path(os.getenv("JSONTABLES_PATH"))

    # Empty/unset means compact output.
    indent = _env_int("JSONTABLES_INDENT")

    create_missing = _env_bool("JSONTABLES_CREATE_MISSING", True)
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        db_path=db_path,
        indent=indent,
        create_missing=create_missing,
        debug_log_requests=debug_log_requests,
    )
