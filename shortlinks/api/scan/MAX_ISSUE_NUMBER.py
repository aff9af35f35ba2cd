"""Largest issue number a match can carry."""

MAX_ISSUE_NUMBER = 2**63 - 1
