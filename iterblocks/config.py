# iterblocks/config.py
from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class BatchingSettings(BaseSettings):
    """Batching defaults"""
    model_config = SettingsConfigDict(
        env_prefix="ITERBLOCKS_BATCHING_",
        case_sensitive=False,
    )

    default_batch_size: int = Field(
        default=100,
        gt=0,
        description="Batch size used when batches() is called without one",
        json_schema_extra={"example": 500},
    )


class LoggingSettings(BaseSettings):
    """Logging output for the iterblocks package"""
    model_config = SettingsConfigDict(
        env_prefix="ITERBLOCKS_LOGGING_",
        case_sensitive=False,
    )

    enabled: bool = Field(
        default=False,
        description="Emit iterblocks log records (disabled by default for library use)",
    )
    level: LogLevel = Field(
        default="WARNING",
        description="Minimum level for the stderr sink added by configure_logging()",
    )


class IterblocksSettings(BaseSettings):
    """Main configuration for iterblocks"""

    model_config = SettingsConfigDict(
        env_prefix="ITERBLOCKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        # Allow nested env vars with double underscore
        env_nested_delimiter="__",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    batching: BatchingSettings = Field(default_factory=BatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> IterblocksSettings:
    """Return the process-wide settings, loaded once from the environment."""
    return IterblocksSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()


def configure_logging(settings: IterblocksSettings | None = None) -> int | None:
    """Enable iterblocks logging according to ``settings``.

    Returns:
        The loguru sink id that was added, or None when logging stays disabled.
    """
    if settings is None:
        settings = get_settings()
    if not settings.logging.enabled:
        logger.disable("iterblocks")
        return None

    logger.enable("iterblocks")
    return logger.add(
        sys.stderr,
        level=settings.logging.level,
        filter="iterblocks",
    )
