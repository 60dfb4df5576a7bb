"""
Lexicalization: choose the raw word stem for a single digit.

The stem depends only on the digit's placement, its value, and the digit
immediately before it (``previous`` is None at the start of the sequence).
An empty string means the digit contributes no word of its own:

    hundreds digit 0         → ""
    tens digit 0 or 1        → ""      (teens are spelled by the ones digit)
    ones digit 0 after 0/2-9 → ""      ("20" is just "twenty")
"""

from __future__ import annotations

from typing import Optional

from .models import Placement
from .tables import TEEN_SUFFIX, TY_SUFFIX, affix_stem, base_stem, modifier_stem


# ─── Dispatcher ─────────────────────────────────────────────────────


def resolve_base(previous: Optional[str], current: str, placement: Placement) -> str:
    """Return the raw stem for ``current`` given its placement."""
    value = int(current)

    if placement == Placement.MOST_SIGNIFICANT:
        return lexicalize_most_significant(value)
    if placement == Placement.MID_POINT:
        return lexicalize_midpoint(value)
    return lexicalize_least_significant(previous, value)


# ─── Per-Placement Rules ────────────────────────────────────────────


def lexicalize_most_significant(value: int) -> str:
    return base_stem(value) if value != 0 else ""


def lexicalize_midpoint(value: int) -> str:
    """Tens digit: "twen" + "ty", "for" + "ty", "six" + "ty"."""
    if value < 2:
        return ""
    stem = modifier_stem(value) or affix_stem(value) or base_stem(value)
    return stem + TY_SUFFIX


def lexicalize_least_significant(previous: Optional[str], value: int) -> str:
    """Ones digit, including the whole teen range when the tens digit is 1."""
    if previous is not None and previous != "1" and value == 0:
        return ""
    if previous != "1":
        return base_stem(value)
    if value < 3:
        return base_stem(10 + value)
    return (affix_stem(value) or base_stem(value)) + TEEN_SUFFIX
