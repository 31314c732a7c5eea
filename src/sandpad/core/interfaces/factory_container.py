from __future__ import annotations

from abc import abstractmethod
from typing import Any

from .component_factory import IComponentFactory
from .factory_registry import IFactoryRegistry
from .service_container import IServiceContainer

__all__ = ["IFactoryEnabledContainer"]


class IFactoryEnabledContainer(IServiceContainer, IFactoryRegistry):
    """Single abstraction for service lookup and factory-based creation.

    Unlike :class:`IFactoryRegistry`, :meth:`get_factory` never returns
    ``None`` here: a missing factory is raised as an error.
    """

    @abstractmethod
    def get_factory(self, component_type: str, factory_id: str) -> IComponentFactory[Any, Any]:  # noqa: D401
        """Return the factory for the exact pair or raise."""
