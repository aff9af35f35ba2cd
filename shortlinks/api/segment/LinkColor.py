"""Link colour marker enum."""

from enum import Enum


class LinkColor(str, Enum):
    ISSUE = "issue-link"
