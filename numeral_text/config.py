"""
Generator settings read from the environment.

    NUMERAL_TEXT_CONJUNCTION   true → British "and" ("one hundred and five")
    NUMERAL_TEXT_LOG_LEVEL     level name applied by the CLI (default WARNING)

Entry points (main.py, api.py) load a .env file before building settings.
An unparseable value fails when the settings object is created.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GeneratorSettings(BaseSettings):
    """Rendering options shared by every conversion of one generator."""

    model_config = SettingsConfigDict(env_prefix="NUMERAL_TEXT_", frozen=True)

    conjunction: bool = False
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
