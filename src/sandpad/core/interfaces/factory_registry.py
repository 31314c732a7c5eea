from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .component_factory import IComponentFactory

__all__ = ["IFactoryRegistry"]


class IFactoryRegistry(ABC):
    """Registry of component factories keyed by type and id."""

    @abstractmethod
    def register_factory(self, factory: IComponentFactory[Any, Any]) -> None:  # noqa: D401
        """Add *factory*; raise if its (type, id) pair is already taken."""

    @abstractmethod
    def get_factory(
        self, component_type: str, factory_id: str
    ) -> Optional[IComponentFactory[Any, Any]]:  # noqa: D401
        """Return the factory registered for the exact pair, if any."""

    @abstractmethod
    def get_factories_for_type(self, component_type: str) -> List[IComponentFactory[Any, Any]]:  # noqa: D401
        """Return all factories for *component_type* in registration order."""
