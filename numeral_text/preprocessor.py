"""
Source text preprocessing: whitespace, sign and leading zeros.

Input:   "  -0042 "
Output:  (Sign.NEGATIVE, "42")

The preprocessor never rejects anything. Whatever survives is handed to the
validators, which decide whether it is a digit sequence at all.
"""

from __future__ import annotations

from .models import Sign

_SIGNS: dict[str, Sign] = {
    "-": Sign.NEGATIVE,
    "+": Sign.POSITIVE,
}


def identify_sign(text: str) -> tuple[Sign, str]:
    """Split an optional leading '+' or '-' from already-trimmed text."""
    sign = _SIGNS.get(text[:1], Sign.NONE)
    if sign is Sign.NONE:
        return sign, text
    return sign, text[1:]


def remove_leading_zeros(digits: str) -> str:
    """Strip leading '0' characters, always keeping the last character.

    "007" → "7", "000" → "0", "" → "".
    """
    end = 0
    while end < len(digits) - 1 and digits[end] == "0":
        end += 1
    return digits[end:]


def preprocess(source: str) -> tuple[Sign, str]:
    """Trim, extract the sign, and drop insignificant zeros.

    The caller guarantees ``source`` is not empty or whitespace-only.
    """
    sign, digits = identify_sign(source.strip())
    return sign, remove_leading_zeros(digits)
