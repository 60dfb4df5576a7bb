"""
Morphologization: attach connectives and group names to a raw stem.

    hundreds  "one"    → "one hundred"
    tens      "twenty" → "and twenty"   (conjunction style, not first word)
    ones      "two"    → "-two"         (after a tens word)
              "five"   → "and five"     (conjunction style, after 0/1 tens
                                         within a group that has a hundreds
                                         position)

Only called for non-empty stems.
"""

from __future__ import annotations

from typing import Optional

from .tables import scale_name

CONJUNCTION = "and"
HYPHEN = "-"


def morphologize_most_significant(stem: str) -> str:
    return f"{stem} {scale_name(0)}"


def morphologize_midpoint(
    stem: str, previous: Optional[str], conjunction: bool = False
) -> str:
    if conjunction and previous is not None:
        return f"{CONJUNCTION} {stem}"
    return stem


def morphologize_least_significant(
    stem: str,
    most_previous: Optional[str],
    previous: Optional[str],
    conjunction: bool = False,
) -> str:
    """Hyphenate after a tens word, optionally insert "and" after 0/1 tens."""
    if previous is None:
        return stem
    if previous in ("0", "1"):
        if conjunction and most_previous is not None:
            return f"{CONJUNCTION} {stem}"
        return stem
    return HYPHEN + stem
