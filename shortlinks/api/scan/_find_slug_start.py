"""Locate an ``owner/repo`` slug in front of an anchor."""

from ._is_slug_char import _is_slug_char
from ._rejects_left_context import _rejects_left_context


def _find_slug_start(text: str, anchor: int, floor: int) -> int | None:
    """Return the start of the ``owner/repo`` slug ending at ``anchor``.

    Args:
        text: Text being scanned
        anchor: Index of the ``#``
        floor: First index not consumed by an earlier match; the slug may not
            reach below it

    Returns:
        Index of the first owner character, or None when no valid slug
        (non-empty owner and repo, one ``/``) sits directly before the anchor.
    """
    repo_start = anchor
    while repo_start > floor and _is_slug_char(text[repo_start - 1]):
        repo_start -= 1
    if repo_start == anchor or repo_start - 1 < floor or text[repo_start - 1] != "/":
        return None

    owner_end = repo_start - 1
    owner_start = owner_end
    while owner_start > floor and _is_slug_char(text[owner_start - 1]):
        owner_start -= 1
    if owner_start == owner_end:
        return None

    # The slug needs the same left boundary as a bare shortlink ("a/b/c#1" is not "b/c#1")
    if owner_start > 0 and _rejects_left_context(text[owner_start - 1]):
        return None
    return owner_start
