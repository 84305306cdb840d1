"""Runtime configuration — env-driven.

Settings come from ``FTEE_*`` environment variables or a ``.env`` file in
the working directory. Command line options override them.
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DELIMITER = "FTEE"


def check_delimiter(value: str) -> str:
    """Reject delimiters that could never match a whitespace-separated field."""
    if not value:
        raise ValueError("delimiter must not be empty")
    if value.split() != [value]:
        raise ValueError(f"delimiter {value!r} must not contain whitespace")
    return value


def check_log_level(value: str) -> str:
    """Normalise a logging level name, rejecting unknown ones."""
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {value!r}")
    return level


class FteeConfig(BaseSettings):
    """ftee settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export FTEE_DELIMITER=SPLIT
        export FTEE_LOG_LEVEL=DEBUG

    Or via .env file::

        FTEE_ENCODING=latin-1
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FTEE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @field_validator("delimiter")
    @classmethod
    def _validate_delimiter(cls, value: str) -> str:
        return check_delimiter(value)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        return check_log_level(value)


# Module-level singleton — import as `from ftee.config import config`
config = FteeConfig()
