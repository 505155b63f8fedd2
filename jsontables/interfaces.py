from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TextChannel(Protocol):
    """
    Whole-file text storage behind a DocumentStore: read everything, overwrite everything.
    """

    @property
    def path(self) -> Path:
        ...

    def read(self) -> str | None:
        """Return the full content, or None when there is none."""
        ...

    def write(self, text: str) -> None:
        """Replace the full content."""
        ...
