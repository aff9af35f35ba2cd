"""Shortlink reference scanner (UNO: single function)."""

import logging

from .Context import Context
from .Match import Match
from .MAX_ISSUE_NUMBER import MAX_ISSUE_NUMBER
from .OverflowPolicy import OverflowPolicy
from ._find_slug_start import _find_slug_start
from ._parse_number import _parse_number
from ._rejects_left_context import _rejects_left_context

logger = logging.getLogger(__name__)


def scan(text: str, context: Context, overflow: OverflowPolicy = OverflowPolicy.REJECT) -> list[Match]:
    """Find ``#N`` and ``owner/repo#N`` shortlinks in free-form text.

    Every ``#`` is tried as an anchor, left to right. A qualified
    ``owner/repo`` slug directly in front of it is preferred; otherwise the
    character before the anchor must not be a letter, a digit or ``/``. The
    anchor must be followed by digits, and the digit run must not be followed
    by a letter or digit. Bare shortlinks take owner and repo from ``context``.

    Args:
        text: Text to scan
        context: Owner/repo used for bare shortlinks
        overflow: What to do with numbers above MAX_ISSUE_NUMBER

    Returns:
        Matches sorted by start, never overlapping. Invalid candidates are
        left out; no input raises.
    """
    matches: list[Match] = []
    length = len(text)
    floor = 0  # everything below has been consumed by an accepted match

    anchor = text.find("#")
    while anchor != -1:
        resume = anchor + 1

        slug_start = _find_slug_start(text, anchor, floor)
        left = text[anchor - 1] if anchor > 0 else ""
        if slug_start is None and _rejects_left_context(left):
            logger.debug("Rejected anchor at %d: preceded by %r", anchor, left)
            anchor = text.find("#", resume)
            continue

        digits_end = resume
        while digits_end < length and "0" <= text[digits_end] <= "9":
            digits_end += 1
        if digits_end == resume:
            logger.debug("Rejected anchor at %d: no digits follow", anchor)
            anchor = text.find("#", resume)
            continue
        if digits_end < length and text[digits_end].isalnum():
            logger.debug("Rejected anchor at %d: digits run into %r", anchor, text[digits_end])
            anchor = text.find("#", resume)
            continue

        number = _parse_number(text[resume:digits_end])
        if number is None:
            if overflow is OverflowPolicy.REJECT:
                logger.warning("Rejected anchor at %d: number exceeds %d", anchor, MAX_ISSUE_NUMBER)
                anchor = text.find("#", resume)
                continue
            logger.warning("Saturated number at %d to %d", anchor, MAX_ISSUE_NUMBER)
            number = MAX_ISSUE_NUMBER

        if slug_start is None:
            start, owner, repo = anchor, context.owner, context.repo
        else:
            start = slug_start
            owner, _, repo = text[slug_start:anchor].partition("/")

        matches.append(
            Match(
                start=start,
                end=digits_end,
                display_text=text[start:digits_end],
                owner=owner,
                repo=repo,
                number=number,
            )
        )
        floor = digits_end
        anchor = text.find("#", digits_end)

    return matches
