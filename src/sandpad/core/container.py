from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict

from .exceptions import ServiceNotFoundError
from .interfaces.service_container import IServiceContainer

__all__ = ["ServiceContainer"]


class ServiceContainer(IServiceContainer):
    """Light-weight service locator.

    The container stores *instances*, never constructors, under unique
    string identifiers. Registering an identifier twice replaces the first
    instance; no shape checks are performed on what gets stored, so type
    correctness is the caller's concern.
    """

    def __init__(self) -> None:  # noqa: D401
        self._services: Dict[str, Any] = {}

    # ---------------------------------------------------------------------
    # Registration helpers
    # ---------------------------------------------------------------------
    def register(self, service_id: str, instance: Any) -> None:
        """Bind *instance* to *service_id*, overwriting silently."""
        self._services[service_id] = instance

    # ------------------------------------------------------------------
    # Resolution helpers
    # ------------------------------------------------------------------
    def get(self, service_id: str) -> Any:
        """Return the instance registered under *service_id*."""
        if not self.has(service_id):
            raise ServiceNotFoundError(service_id)
        return self._services[service_id]

    def has(self, service_id: str) -> bool:
        return service_id in self._services

    # ------------------------------------------------------------------
    # Convenience API
    # ------------------------------------------------------------------
    @property
    def registrations(self) -> MappingProxyType:
        """Return a read-only view of current registrations.

        Intended for host applications listing what was wired at startup.
        """
        return MappingProxyType(self._services)
