"""Scan and build in one call (UNO: single function)."""

from .scan.Context import Context
from .scan.OverflowPolicy import OverflowPolicy
from .scan.scan import scan
from .segment.build import build
from .segment.StyledDocument import StyledDocument


def annotate(text: str, context: Context, overflow: OverflowPolicy = OverflowPolicy.REJECT) -> StyledDocument:
    """Return ``text`` as a document with its shortlinks styled."""
    return build(text, scan(text, context, overflow))
