from __future__ import annotations

import logging

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

__all__ = ["SandpadSettings"]


class SandpadSettings(BaseSettings):
    """Application settings loaded from environment variables and ``.env``."""

    debug_mode: bool = Field(False, description="DEBUG_MODE: verbose logging")
    log_level: str = Field("INFO", description="LOG_LEVEL: standard logging level name")

    # Event bus / error reporting
    event_debug: bool = Field(False, description="EVENT_DEBUG: log every emitted event")
    notify_errors: bool = Field(True, description="NOTIFY_ERRORS: forward errors to the notifier")

    # Preferred math-widget factory id; bootstrap hands it to the container
    # so get_default_factory("math-widget") picks it when registered.
    default_math_api: str = Field("desmos", description="DEFAULT_MATH_API")

    @field_validator("log_level", mode="before")
    def _validate_log_level(cls, v: str) -> str:  # noqa: D401
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_math_api", mode="before")
    def _normalise_math_api(cls, v: str) -> str:  # noqa: D401
        value = str(v).strip().lower()
        if not value:
            raise ValueError("DEFAULT_MATH_API must not be empty")
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
