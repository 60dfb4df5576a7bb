"""
Numerical realization: turn a validated digit sequence into words.

Flow per digit (single left-to-right pass, no backtracking):

    digit ──► classify ──► lexicalize ──► morphologize ──► emit
              (group,       (raw stem)     (hundred/and/    (space, hyphen,
               placement)                   hyphen)          group name)

Each step looks at no more than the current digit, the two digits before
it, and absolute position. Nothing is carried between iterations except the
output buffer, so any number of realizations can run concurrently.

The realizer trusts its input. It is only ever called with a digit sequence
that passed validators.validate_all().
"""

from __future__ import annotations

import logging
from typing import Optional

from .lexicalizer import resolve_base
from .models import Placement, Sign
from .morphologizer import (
    HYPHEN,
    morphologize_least_significant,
    morphologize_midpoint,
    morphologize_most_significant,
)
from .positional import get_group, get_placement
from .tables import scale_name

logger = logging.getLogger(__name__)


def realize(digits: str, sign: Sign = Sign.NONE, conjunction: bool = False) -> str:
    """Spell ``digits`` as an English cardinal number.

    Args:
        digits: Validated, zero-trimmed digit sequence, e.g. "1001".
        sign: Leading sign recorded by the preprocessor.
        conjunction: Insert "and" British-style ("one hundred and five").

    Returns:
        e.g. "negative one thousand one"
    """
    buffer: list[str] = []
    if sign is not Sign.NONE:
        buffer.append(sign.word)

    length = len(digits)
    for index, current in enumerate(digits):
        previous = _peek_back(digits, index, 1)
        most_previous = _peek_back(digits, index, 2)
        group = get_group(index, length)
        placement = get_placement(index, length)

        token = _morphologize(
            resolve_base(previous, current, placement),
            placement,
            previous,
            most_previous,
            conjunction,
        )

        if (
            group != 0
            and placement == Placement.LEAST_SIGNIFICANT
            and not is_empty_group(most_previous, previous, current)
        ):
            token = f"{token} {scale_name(group)}" if token else scale_name(group)

        _emit(buffer, token)

    text = "".join(buffer)
    logger.debug("Realized %r as %r", digits, text)
    return text


# ─── Helpers ────────────────────────────────────────────────────────


def is_empty_group(
    most_previous: Optional[str], previous: Optional[str], current: str
) -> bool:
    """True when all three digits of a group are '0'."""
    return most_previous == "0" and previous == "0" and current == "0"


def _peek_back(digits: str, index: int, distance: int) -> Optional[str]:
    position = index - distance
    return digits[position] if position >= 0 else None


def _morphologize(
    stem: str,
    placement: Placement,
    previous: Optional[str],
    most_previous: Optional[str],
    conjunction: bool,
) -> str:
    if not stem:
        return stem
    if placement == Placement.MOST_SIGNIFICANT:
        return morphologize_most_significant(stem)
    if placement == Placement.MID_POINT:
        return morphologize_midpoint(stem, previous, conjunction)
    return morphologize_least_significant(stem, most_previous, previous, conjunction)


def _emit(buffer: list[str], token: str) -> None:
    """Append a token, separating it from earlier output with one space.

    Hyphenated tokens attach directly to the preceding tens word.
    """
    if not token:
        return
    if buffer and not token.startswith(HYPHEN):
        buffer.append(" ")
    buffer.append(token)
