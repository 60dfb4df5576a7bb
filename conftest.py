"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep a developer's NUMERAL_TEXT_* environment out of the suite."""
    from numeral_text import generator

    monkeypatch.delenv("NUMERAL_TEXT_CONJUNCTION", raising=False)
    monkeypatch.delenv("NUMERAL_TEXT_LOG_LEVEL", raising=False)
    monkeypatch.setattr(generator, "_default", None)
    yield
