"""
Positional classification of digits.

Every function here is a pure function of (index, length). The realizer
calls them per digit instead of keeping a lexer cursor, so a conversion
carries no state between steps.

    1,234,567   index:     0123456
                inverted:  6543210
                group:     2111000
                placement: 3123123
"""

from __future__ import annotations

from .models import Placement


def invert_index(index: int, length: int) -> int:
    """Position counted from the least-significant digit."""
    return (length - 1) - index


def get_group(index: int, length: int) -> int:
    """3-digit group number, 0 for the lowest group."""
    return invert_index(index, length) // 3


def get_placement(index: int, length: int) -> Placement:
    """Digit role relative to its group."""
    if (length - index) % 3 == 0:
        return Placement.MOST_SIGNIFICANT
    if (length - index + 1) % 3 == 0:
        return Placement.MID_POINT
    return Placement.LEAST_SIGNIFICANT
