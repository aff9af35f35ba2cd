"""Scan API domain: find shortlinks in text."""

from .Context import Context
from .Match import Match
from .MAX_ISSUE_NUMBER import MAX_ISSUE_NUMBER
from .OverflowPolicy import OverflowPolicy
from .scan import scan

__all__ = [
    "MAX_ISSUE_NUMBER",
    "Context",
    "Match",
    "OverflowPolicy",
    "scan",
]
