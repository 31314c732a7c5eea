from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from ..config.settings import SandpadSettings

__all__ = ["IConfigurationService"]


class IConfigurationService(ABC):
    """Read access to :class:`SandpadSettings` for feature code.

    Keys are settings field names (``debug_mode``, ``log_level``,
    ``event_debug``, ``notify_errors``, ``default_math_api``); a dotted key
    walks attributes of nested values.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:  # noqa: D401
        """Return the value at dotted *key*, or *default* if any segment is missing."""

    @abstractmethod
    def validate_configuration(self) -> bool:  # noqa: D401
        """Return *True* or raise :class:`ConfigurationError` for inconsistent settings."""

    @property
    @abstractmethod
    def settings(self) -> "SandpadSettings":  # noqa: D401
        """The validated settings object backing this service."""
