from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel

from .errors import ParseError
from .json_store import dump_json, parse_json


def normalize_value(value: Any) -> Any:
    """
    Detached copy of value made only of JSON types (dict, list, str, int, float, bool, None).

    Tuples become lists; anything json cannot encode raises ParseError.
    """
    try:
        text = dump_json(value)
        # The file is UTF-8; lone surrogates cannot be written.
        text.encode("utf-8")
        return parse_json(text)
    except UnicodeEncodeError as e:
        raise ParseError(f"Value is not encodable as UTF-8: {e}", cause=e) from e
    except (TypeError, ValueError) as e:
        raise ParseError(f"Value is not JSON serializable: {e}", cause=e) from e


def to_record(value: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """
    Build a record from a mapping or from a pydantic model's declared fields.
    """
    if isinstance(value, BaseModel):
        raw: Any = value.model_dump(mode="json")
    elif isinstance(value, Mapping):
        bad = [k for k in value if not isinstance(k, str)]
        if bad:
            raise ParseError(f"Record keys must be strings, got {bad!r}")
        raw = dict(value)
    else:
        raise ParseError(f"Cannot build a record from {type(value).__name__}")
    return normalize_value(raw)
