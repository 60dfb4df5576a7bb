"""
Public entry points: orchestrates preprocessing, validation and realization.

Flow:
  ┌──────────────┐
  │ Source text  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Preprocessor │   ← Trim, sign, leading zeros
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Validators  │   ← Length + ASCII digits
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │   Realizer   │   ← Classify → Lexicalize → Morphologize
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │    Words     │
  └──────────────┘

Design principles:
  - generate_text() and can_generate() share prepare(); they cannot drift.
  - Empty input is a caller error (InvalidArgumentError), anything else
    that is not a digit sequence is a data error (NumeralFormatError).
  - Both are raised before a single word is produced.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import GeneratorSettings
from .exceptions import InvalidArgumentError, NumeralFormatError
from .models import Numeral
from .preprocessor import preprocess
from .realizer import realize
from .validators import validate_all

logger = logging.getLogger(__name__)


class NumeralTextGenerator:
    """Spells integer literals as English cardinal numbers.

    Usage:
        generator = NumeralTextGenerator()
        generator.generate_text("-120")   # "negative one hundred twenty"
        generator.can_generate("12a")     # False
    """

    def __init__(self, settings: GeneratorSettings | None = None):
        self.settings = settings or GeneratorSettings()

    def prepare(self, source: Optional[str]) -> Numeral:
        """Preprocess and validate ``source`` without raising for bad digits.

        Raises:
            InvalidArgumentError: If ``source`` is None, empty or whitespace.
        """
        if source is None or not source.strip():
            raise InvalidArgumentError(
                "Value cannot be null, empty or whitespace.",
                details={"source": source},
            )

        sign, digits = preprocess(source)
        return Numeral(
            source=source,
            sign=sign,
            digits=digits,
            findings=validate_all(digits),
        )

    def can_generate(self, source: Optional[str]) -> bool:
        """Return whether generate_text() would succeed for ``source``."""
        try:
            return self.prepare(source).is_valid
        except InvalidArgumentError:
            return False

    def generate_text(
        self, source: Optional[str], conjunction: bool | None = None
    ) -> str:
        """Return the English cardinal spelling of ``source``.

        Args:
            source: e.g. "  -0042 "
            conjunction: Override the configured "and" style for this call.

        Returns:
            e.g. "negative forty-two"

        Raises:
            InvalidArgumentError: If ``source`` is None, empty or whitespace.
            NumeralFormatError: If the digits are malformed or too long.
        """
        return self.spell(self.prepare(source), conjunction)

    def spell(self, numeral: Numeral, conjunction: bool | None = None) -> str:
        """Realize an already prepared numeral.

        Raises:
            NumeralFormatError: If ``numeral`` carries a validation finding.
        """
        error = numeral.first_error
        if error is not None:
            logger.debug("Rejected %r: %s", numeral.source, error.code)
            raise NumeralFormatError(
                error.message,
                details={"finding": error.code, "source": numeral.source, **error.details},
            )

        if conjunction is None:
            conjunction = self.settings.conjunction
        return realize(numeral.digits, numeral.sign, conjunction)


# ─── Module-level API ───────────────────────────────────────────────

_default: NumeralTextGenerator | None = None


def _get_default() -> NumeralTextGenerator:
    global _default  # noqa: PLW0603
    if _default is None:
        _default = NumeralTextGenerator(GeneratorSettings())
    return _default


def generate_text(source: Optional[str], conjunction: bool | None = None) -> str:
    """Spell ``source`` with the environment-configured default generator."""
    return _get_default().generate_text(source, conjunction)


def can_generate(source: Optional[str]) -> bool:
    return _get_default().can_generate(source)
