import string

_SLUG_CHARS = frozenset(string.ascii_letters + string.digits + "-_")


def _is_slug_char(char: str) -> bool:
    return char in _SLUG_CHARS
