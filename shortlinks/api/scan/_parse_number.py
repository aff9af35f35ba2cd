from .MAX_ISSUE_NUMBER import MAX_ISSUE_NUMBER

_MAX_DIGITS = len(str(MAX_ISSUE_NUMBER))


def _parse_number(digits: str) -> int | None:
    """Parse an ASCII digit run, returning None when it exceeds MAX_ISSUE_NUMBER.

    Runs longer than the maximum are never handed to int(), which refuses very
    long strings on current interpreters.
    """
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        return None
    number = int(significant)
    return number if number <= MAX_ISSUE_NUMBER else None
