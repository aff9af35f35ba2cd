"""Overflow policy enum for oversized issue numbers."""

from enum import Enum


class OverflowPolicy(str, Enum):
    REJECT = "reject"
    SATURATE = "saturate"
