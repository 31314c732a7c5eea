"""Configuration package.

Settings are built on demand through :func:`load_settings`; nothing is
instantiated or registered at import time.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .configuration_service import ConfigurationService
from .settings import SandpadSettings

__all__ = ["ConfigurationService", "SandpadSettings", "load_settings"]


def load_settings(**overrides: Any) -> SandpadSettings:
    """Return settings from the environment, with keyword *overrides* applied."""
    try:
        return SandpadSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc
