from __future__ import annotations

from typing import Any

from ..exceptions import ConfigurationError
from ..interfaces.config_service import IConfigurationService
from .settings import SandpadSettings

__all__ = ["ConfigurationService"]


class ConfigurationService(IConfigurationService):
    """Runtime wrapper around :class:`SandpadSettings`."""

    def __init__(self, *, settings: SandpadSettings) -> None:
        self._settings = settings
        if not self.validate_configuration():
            raise ConfigurationError("Invalid application configuration detected")

    # ------------------------------------------------------------------
    # IConfigurationService implementation
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:  # noqa: D401
        current: Any = self._settings
        for part in key.split("."):
            if hasattr(current, part):
                current = getattr(current, part)
            else:
                return default
        return current

    def validate_configuration(self) -> bool:  # noqa: D401
        # Field-level checks already ran in the pydantic validators.
        if self._settings.debug_mode and self._settings.log_level not in ("DEBUG", "INFO"):
            raise ConfigurationError(
                "DEBUG_MODE requires LOG_LEVEL to be DEBUG or INFO",
                context={"log_level": self._settings.log_level},
            )
        return True

    @property
    def settings(self) -> SandpadSettings:
        return self._settings
