"""Styled segment (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .SegmentAttributes import SegmentAttributes


@dataclass(frozen=True)
class StyledSegment:
    """A span of text carrying link attributes."""

    text: str
    attributes: SegmentAttributes

    @property
    def is_styled(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "styled": True, "attributes": self.attributes.as_dict()}
