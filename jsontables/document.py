from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import RootModel, ValidationError

from .errors import ParseError
from .json_store import dump_json, parse_json


class Document(RootModel[dict[str, dict[str, Any]]]):
    """
    Mirrors the on-disk schema:
      {
        "<table>": { "<id>": { ...record fields... }, ... },
        ...
      }

    Every top-level value must be an object. Key order is preserved.
    """

    @classmethod
    def from_text(cls, text: str) -> "Document":
        try:
            raw = parse_json(text)
        except ValueError as e:
            raise ParseError(f"Could not parse document: {e}", cause=e) from e
        return cls.from_disk_doc(raw)

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "Document":
        try:
            return cls.model_validate(doc, strict=True)
        except ValidationError as e:
            raise ParseError("Document must be an object whose values are all objects", cause=e) from e

    def to_text(self, *, indent: int | None = None) -> str:
        return dump_json(self.root, indent=indent)


@dataclass(frozen=True)
class Empty:
    """No document: the backing file had no content when it was loaded."""


@dataclass(frozen=True)
class Loaded:
    document: Document


DocumentState = Union[Empty, Loaded]


def load_state(text: str | None) -> DocumentState:
    if text is None:
        return Empty()
    return Loaded(Document.from_text(text))
