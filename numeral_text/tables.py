"""
Static lookup tables for English cardinal spelling.

Two read-only tables drive the whole realizer:

  MORPHOLOGY  digit value (0-12) → base stem, affix stem, modifier stem
  SCALES      group number       → short-scale group name

The affix is the clipped stem used before a bound morpheme ("fif" + "teen"),
the modifier is a respelled stem used before "-ty" only ("for" + "ty").
Values 10-12 are irregular and only ever used whole.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class MorphEntry:
    """Word stems for a single digit value."""

    base: str
    affix: Optional[str] = None  # Before "-teen" and "-ty"
    modifier: Optional[str] = None  # Before "-ty", wins over affix


# ─── Morphology Table ───────────────────────────────────────────────

MORPHOLOGY: tuple[MorphEntry, ...] = (
    MorphEntry("zero"),
    MorphEntry("one"),
    MorphEntry("two", affix="twen"),
    MorphEntry("three", affix="thir"),
    MorphEntry("four", modifier="for"),
    MorphEntry("five", affix="fif"),
    MorphEntry("six"),
    MorphEntry("seven"),
    MorphEntry("eight", affix="eigh"),
    MorphEntry("nine"),
    MorphEntry("ten"),
    MorphEntry("eleven"),
    MorphEntry("twelve"),
)

# Bound morphemes
TEEN_SUFFIX = "teen"  # 13-19
TY_SUFFIX = "ty"  # Multiples of ten


# ─── Scale Table ────────────────────────────────────────────────────
# Index = group number. Group 0 covers digit positions 0-2 and lends its
# name to every hundreds digit; group n > 0 covers positions 3n to 3n+2.

SCALES: tuple[str, ...] = (
    "hundred",  # 10^2
    "thousand",  # 10^3
    "million",
    "billion",
    "trillion",  # 10^12
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",  # 10^30
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",  # 10^63
    "unvigintillion",
    "duovigintillion",
    "trevigintillion",
    "quattuorvigintillion",
    "quinvigintillion",
    "sexvigintillion",
    "septenvigintillion",
    "octovigintillion",
    "novemvigintillion",
    "trigintillion",  # 10^93
    "untrigintillion",
    "duotrigintillion",
    "tretrigintillion",
    "quattuortrigintillion",
    "quintrigintillion",
    "sextrigintillion",
    "septentrigintillion",
    "octotrigintillion",
    "novemtrigintillion",
    "quadragintillion",  # 10^123
    "unquadragintillion",  # 10^126
)

# Longest digit sequence the scale table can name
MAX_DIGITS: int = len(SCALES) * 3


# ─── Accessors ──────────────────────────────────────────────────────


def base_stem(value: int) -> str:
    return MORPHOLOGY[value].base


def affix_stem(value: int) -> Optional[str]:
    return MORPHOLOGY[value].affix


def modifier_stem(value: int) -> Optional[str]:
    return MORPHOLOGY[value].modifier


def scale_name(group: int) -> str:
    """Return the group name; an out-of-range group raises IndexError."""
    return SCALES[group]
