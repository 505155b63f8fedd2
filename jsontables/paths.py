from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    # jsontables/paths.py -> jsontables -> project root
    return Path(__file__).resolve().parents[1]


def data_dir() -> Path:
    return project_root() / "data"


def default_db_path() -> Path:
    return data_dir() / "db.json"


def resolve_db_path(raw: str | None) -> Path:
    """
    Expand a configured path; relative paths are taken from the project root.
    """
    if not raw:
        return default_db_path()
    p = Path(raw).expanduser()
    return p if p.is_absolute() else (project_root() / p)
