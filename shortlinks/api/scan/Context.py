"""Default owner/repo context (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
    """The tracker project that bare shortlinks such as ``#12`` resolve to."""

    owner: str
    repo: str
