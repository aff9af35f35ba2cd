"""Style attributes of a segment (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .ATTRIBUTE_KEYS import ISSUE_KEY, LINK_COLOR_KEY
from .IssueReference import IssueReference
from .LinkColor import LinkColor


@dataclass(frozen=True)
class SegmentAttributes:
    """Fixed set of optional attributes a shortlink annotator can attach."""

    link_color: LinkColor | None = None
    issue: IssueReference | None = None

    def as_dict(self) -> dict[str, Any]:
        """Flatten to namespaced keys for merging with other annotators' attributes."""
        attributes: dict[str, Any] = {}
        if self.link_color is not None:
            attributes[LINK_COLOR_KEY] = self.link_color.value
        if self.issue is not None:
            attributes[ISSUE_KEY] = self.issue.to_dict()
        return attributes
