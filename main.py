#!/usr/bin/env python3
"""
Numeral Text: Entry Point
=========================

Spells each integer literal given on the command line.

Usage:
    python main.py                   # Render the built-in sample set
    python main.py 42 -120 +0007     # Render specific numerals
    python main.py --and 1001        # British style: "one thousand and one"
    python main.py -- -1x            # Arguments starting with "-" after "--"
    NUMERAL_TEXT_LOG_LEVEL=DEBUG python main.py 42
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from numeral_text.config import GeneratorSettings
from numeral_text.exceptions import NumeralTextError
from numeral_text.generator import NumeralTextGenerator

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


SAMPLES = [
    "0",
    "15",
    "42",
    "100",
    "120",
    "1001",
    "-7",
    "+20",
    "007",
    "1234567",
    "1000000000000",
    "12a",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Pretty Printer ─────────────────────────────────────────────────


def render(generator: NumeralTextGenerator, source: str) -> bool:
    """Print one numeral and its spelling. Returns False on rejection."""
    try:
        text = generator.generate_text(source)
    except NumeralTextError as e:
        print(f"  {_BOLD}{source!r:>16}{_RESET}  {_RED}[{e.code}]{_RESET} {e}")
        return False
    print(f"  {_BOLD}{source!r:>16}{_RESET}  {_DIM}→{_RESET} {_GREEN}{text}{_RESET}")
    return True


# ─── Main ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Spell integer literals as English cardinal numbers.",
        epilog=(
            "Negative numerals such as -7 are accepted as-is. Put any other "
            "argument that starts with '-' after '--'."
        ),
    )
    parser.add_argument(
        "numerals",
        nargs="*",
        help="Integer literals, optionally signed (e.g. 42, -120, +0007).",
    )
    parser.add_argument(
        "--and",
        dest="conjunction",
        action="store_true",
        help='British style: "one hundred and five".',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Spell every numeral argument; exit 1 if any was rejected."""
    args = build_parser().parse_args(argv)

    try:
        settings = GeneratorSettings()
    except ValidationError as e:
        print(f"{_RED}Invalid NUMERAL_TEXT_* setting:{_RESET} {e}", file=sys.stderr)
        return 2
    if args.conjunction:
        settings = settings.model_copy(update={"conjunction": True})

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    generator = NumeralTextGenerator(settings)
    sources = args.numerals or SAMPLES
    results = [render(generator, source) for source in sources]

    # The sample set deliberately contains a rejected numeral
    if not args.numerals:
        return 0
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
