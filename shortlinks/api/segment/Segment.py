"""Segment type: either plain or styled text."""

from .PlainSegment import PlainSegment
from .StyledSegment import StyledSegment

Segment = PlainSegment | StyledSegment
