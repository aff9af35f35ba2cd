"""Unstyled segment (UNO: single model)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlainSegment:
    text: str

    @property
    def is_styled(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "styled": False, "attributes": {}}
