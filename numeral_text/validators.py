"""
Deterministic digit-sequence validation.

These validators run before any word is produced. A digit sequence that
fails here never reaches the realizer.

Each validator function:
  - Takes the preprocessed digit string
  - Returns a list of ValidationFinding objects (empty = all clear)
  - Is independently testable

The validate_all() function runs every check and aggregates findings.
"""

from __future__ import annotations

from .models import ValidationFinding
from .tables import MAX_DIGITS

# ─── Constants ───────────────────────────────────────────────────────

# str.isdigit() also accepts superscripts and non-ASCII digits
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_all(digits: str) -> list[ValidationFinding]:
    """Run ALL validators and collect findings.

    The length check runs first so an oversized input is reported as such
    without scanning every character.
    """
    findings: list[ValidationFinding] = []
    findings.extend(validate_not_empty(digits))
    findings.extend(validate_length(digits))
    if not findings:
        findings.extend(validate_characters(digits))
    return findings


# ─── Individual Validators ───────────────────────────────────────────


def validate_not_empty(digits: str) -> list[ValidationFinding]:
    """A bare sign ("-", "+") leaves nothing to spell."""
    if digits:
        return []
    return [
        ValidationFinding(
            code="EMPTY_DIGIT_SEQUENCE",
            field="digits",
            message="No digits follow the sign.",
        )
    ]


def validate_length(digits: str) -> list[ValidationFinding]:
    """The scale table names at most MAX_DIGITS digits."""
    if len(digits) <= MAX_DIGITS:
        return []
    return [
        ValidationFinding(
            code="DIGIT_LIMIT_EXCEEDED",
            field="digits",
            message=(
                f"Numeral has {len(digits)} significant digits; "
                f"at most {MAX_DIGITS} are supported."
            ),
            details={"length": len(digits), "max_digits": MAX_DIGITS},
        )
    ]


def validate_characters(digits: str) -> list[ValidationFinding]:
    """Every character must be an ASCII decimal digit.

    Reports the first offending character only.
    """
    for index, char in enumerate(digits):
        if char not in ASCII_DIGITS:
            return [
                ValidationFinding(
                    code="NON_DIGIT_CHARACTER",
                    field="digits",
                    message=f"Unexpected character {char!r} at position {index}.",
                    details={"character": char, "index": index},
                )
            ]
    return []
