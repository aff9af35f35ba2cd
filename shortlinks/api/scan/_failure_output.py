from typing import Any


def _failure_output(text: str, errors: list[str]) -> dict[str, Any]:
    """Output dict of a scan command that could not run."""
    return {
        "text": text,
        "context": None,
        "overflow": None,
        "matches": [],
        "segments": [],
        "errors": errors,
    }
