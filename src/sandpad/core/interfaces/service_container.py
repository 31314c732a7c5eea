from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["IServiceContainer"]


class IServiceContainer(ABC):
    """Keyed registry of already-constructed service instances."""

    @abstractmethod
    def register(self, service_id: str, instance: Any) -> None:  # noqa: D401
        """Store *instance* under *service_id*, replacing any previous one."""

    @abstractmethod
    def get(self, service_id: str) -> Any:  # noqa: D401
        """Return the instance stored under *service_id* or raise."""

    @abstractmethod
    def has(self, service_id: str) -> bool:  # noqa: D401
        """Return *True* if *service_id* is registered."""
