"""Namespaced attribute keys attached to styled segments."""

LINK_COLOR_KEY = "shortlinks.link_color"
ISSUE_KEY = "shortlinks.issue"
