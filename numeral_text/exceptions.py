"""
Custom exception hierarchy for numeral text generation.

Each exception type maps to a specific category of rejected input,
enabling precise error handling by callers and the HTTP layer.
"""

from __future__ import annotations


class NumeralTextError(Exception):
    """Base exception for all numeral text generation failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(NumeralTextError, ValueError):
    """The caller passed None, an empty string, or only whitespace."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class NumeralFormatError(NumeralTextError, ValueError):
    """The numeral contains a non-digit character or too many digits."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMERAL_FORMAT_INVALID", message, details)
