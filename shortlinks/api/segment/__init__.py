"""Segment API domain: turn scan matches into a styled document."""

from .ATTRIBUTE_KEYS import ISSUE_KEY, LINK_COLOR_KEY
from .attach import attach
from .build import build
from .IssueReference import IssueReference
from .LinkColor import LinkColor
from .PlainSegment import PlainSegment
from .Segment import Segment
from .SegmentAttributes import SegmentAttributes
from .StyledDocument import StyledDocument
from .StyledSegment import StyledSegment

__all__ = [
    "ISSUE_KEY",
    "LINK_COLOR_KEY",
    "IssueReference",
    "LinkColor",
    "PlainSegment",
    "Segment",
    "SegmentAttributes",
    "StyledDocument",
    "StyledSegment",
    "attach",
    "build",
]
