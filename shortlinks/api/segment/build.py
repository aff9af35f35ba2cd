"""Segment builder (UNO: single function)."""

import logging
from collections.abc import Iterable, Iterator

from ..scan.Match import Match
from .attach import attach
from .PlainSegment import PlainSegment
from .Segment import Segment
from .StyledDocument import StyledDocument
from .StyledSegment import StyledSegment

logger = logging.getLogger(__name__)


def build(text: str, matches: Iterable[Match]) -> StyledDocument:
    """Split text into plain gaps and styled shortlink segments.

    Args:
        text: The scanned text
        matches: Matches from scan(), sorted and non-overlapping

    Returns:
        A document whose segment texts concatenate to ``text``. Empty gaps are
        omitted, so empty text gives an empty document.
    """

    def segments() -> Iterator[Segment]:
        cursor = 0
        for match in matches:
            # Matches that do not describe this text would break the round trip
            if match.start < cursor or match.end <= match.start or text[match.start : match.end] != match.display_text:
                logger.warning("Skipping match %r at %d: does not fit the text", match.display_text, match.start)
                continue
            if match.start > cursor:
                yield PlainSegment(text[cursor : match.start])
            yield StyledSegment(match.display_text, attach(match))
            cursor = match.end
        if cursor < len(text):
            yield PlainSegment(text[cursor:])

    return StyledDocument(tuple(segments()))
