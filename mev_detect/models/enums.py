"""Enumeration types for detection entities."""

from enum import Enum


class Direction(str, Enum):
    """Temporal position of a candidate relative to a reference transaction."""

    BEFORE = "BEFORE"
    AFTER = "AFTER"
