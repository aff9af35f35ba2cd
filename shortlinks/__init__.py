"""shortlinks - find ``#123`` and ``owner/repo#123`` references in free-form text."""

from .api.annotate import annotate
from .api.scan import Context, Match, OverflowPolicy, scan
from .api.segment import StyledDocument, build

__all__ = [
    "Context",
    "Match",
    "OverflowPolicy",
    "StyledDocument",
    "annotate",
    "build",
    "scan",
]
