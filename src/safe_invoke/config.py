"""
Configuration — typed settings loaded from environment/.env.

Uses pydantic-settings so that a misconfigured environment fails loudly
at load time instead of silently changing behavior:

    SAFE_INVOKE_LOG_LEVEL=DEBUG
    SAFE_INVOKE_LOG_FAULTS=true

Settings only affect observability. Outcome shapes and fault handling
are fixed and never configurable.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SafeInvokeSettings(BaseSettings):
    """
    Library settings.

    Load order (highest priority first):
      1. Environment variables prefixed with SAFE_INVOKE_
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFE_INVOKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level for structlog output")
    log_faults: bool = Field(
        default=False,
        description="Emit a debug event every time a fault is captured",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept stdlib level names in any case; reject anything else."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> SafeInvokeSettings:
    """Load settings once per process. Call get_settings.cache_clear() to reload."""
    return SafeInvokeSettings()
