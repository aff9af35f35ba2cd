"""Attribute construction for matched shortlinks (UNO: single function)."""

from ..scan.Match import Match
from .IssueReference import IssueReference
from .LinkColor import LinkColor
from .SegmentAttributes import SegmentAttributes


def attach(match: Match) -> SegmentAttributes:
    """Build the link colour marker and issue payload for a match."""
    return SegmentAttributes(
        link_color=LinkColor.ISSUE,
        issue=IssueReference(owner=match.owner, repo=match.repo, number=match.number),
    )
