"""Issue reference payload (UNO: single model)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class IssueReference:
    """The tracker item a styled segment points at."""

    owner: str
    repo: str
    number: int

    def to_dict(self) -> dict[str, Any]:
        return {"owner": self.owner, "repo": self.repo, "number": self.number}
