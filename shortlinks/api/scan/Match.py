"""Shortlink match model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Match:
    """A shortlink found in scanned text.

    ``start`` and ``end`` are half-open character offsets into the scanned
    text and ``display_text`` is exactly ``text[start:end]``.
    """

    start: int
    end: int
    display_text: str
    owner: str
    repo: str
    number: int

    @property
    def range(self) -> tuple[int, int]:
        return (self.start, self.end)

    @property
    def is_qualified(self) -> bool:
        """True for ``owner/repo#N``, False for a bare ``#N``."""
        return not self.display_text.startswith("#")

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "display_text": self.display_text,
            "owner": self.owner,
            "repo": self.repo,
            "number": self.number,
        }
