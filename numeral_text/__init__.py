"""
Numeral Text: spell integer literals as English cardinal numbers.

Architecture: Preprocess → Validate → Realize (Classify → Lexicalize → Morphologize)
Philosophy:  Work on the digits as text. Never convert to a numeric value.
"""

__version__ = "1.0.0"

from .exceptions import InvalidArgumentError, NumeralFormatError, NumeralTextError
from .generator import NumeralTextGenerator, can_generate, generate_text

__all__ = [
    "InvalidArgumentError",
    "NumeralFormatError",
    "NumeralTextError",
    "NumeralTextGenerator",
    "can_generate",
    "generate_text",
]
