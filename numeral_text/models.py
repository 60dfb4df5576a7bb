"""
Pydantic models for numeral preparation and validation results.

Every field is explicitly typed. A prepared numeral either carries a clean
digit sequence or the findings explaining why it cannot be spelled; the
realizer only ever sees the former.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Sign ───────────────────────────────────────────────────────────


class Sign(str, Enum):
    """Leading sign of the source text."""

    NONE = "none"
    NEGATIVE = "negative"
    POSITIVE = "positive"

    @property
    def word(self) -> str:
        """Spoken prefix, empty for an unsigned numeral."""
        return "" if self is Sign.NONE else self.value


# ─── Placement ──────────────────────────────────────────────────────


class Placement(IntEnum):
    """Role of a digit within its 3-digit group."""

    MOST_SIGNIFICANT = 1  # Hundreds
    MID_POINT = 2  # Tens
    LEAST_SIGNIFICANT = 3  # Ones


# ─── Validation Finding ─────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """A reason the digit sequence cannot be spelled: machine-readable code plus details."""

    code: str  # Machine-readable, e.g. "NON_DIGIT_CHARACTER"
    field: str
    message: str
    details: dict = Field(default_factory=dict)


# ─── Prepared Numeral ───────────────────────────────────────────────


class Numeral(BaseModel):
    """Outcome of preprocessing plus validation for one source string.

    ``digits`` is sign-stripped and zero-trimmed. It is only safe to
    realize when ``is_valid`` is true.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    sign: Sign = Sign.NONE
    digits: str
    findings: list[ValidationFinding] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.findings

    @property
    def first_error(self) -> Optional[ValidationFinding]:
        return self.findings[0] if self.findings else None
