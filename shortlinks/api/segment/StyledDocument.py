"""Styled document model (UNO: single model)."""

from collections.abc import Iterator
from dataclasses import dataclass

from .Segment import Segment
from .StyledSegment import StyledSegment


@dataclass(frozen=True)
class StyledDocument:
    """Ordered segments whose texts concatenate back to the scanned text."""

    segments: tuple[Segment, ...] = ()

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)

    @property
    def links(self) -> list[StyledSegment]:
        """Styled segments in document order."""
        return [segment for segment in self.segments if isinstance(segment, StyledSegment)]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)
