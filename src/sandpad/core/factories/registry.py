from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..events import FactoryEvent, FactoryRegisteredEvent
from ..exceptions import DuplicateFactoryError, FactoryRegistrationError
from ..interfaces.component_factory import IComponentFactory
from ..interfaces.event_bus import IEventBus
from ..interfaces.factory_registry import IFactoryRegistry

logger = logging.getLogger("sandpad")

__all__ = ["FactoryRegistry"]

AnyFactory = IComponentFactory[Any, Any]


class FactoryRegistry(IFactoryRegistry):
    """Registry of component factories.

    Factories are kept per component type in registration order, plus an
    exact-match index on ``(component_type, factory_id)``. A pair can only
    be registered once. Lookups of unknown pairs return ``None`` rather
    than raising; promoting a miss to an error is up to the caller.
    """

    def __init__(self, *, event_bus: Optional[IEventBus] = None) -> None:  # noqa: D401
        self._by_type: Dict[str, List[AnyFactory]] = {}
        self._index: Dict[Tuple[str, str], AnyFactory] = {}
        self._event_bus = event_bus

    # ------------------------------------------------------------------
    def register_factory(self, factory: AnyFactory) -> None:
        if factory is None:
            raise FactoryRegistrationError("Cannot register a missing factory")

        component_type = factory.get_component_type()
        factory_id = factory.get_factory_id()
        if not component_type:
            raise FactoryRegistrationError(
                "Factory must provide a component type",
                context={"factoryId": factory_id},
            )
        if not factory_id:
            raise FactoryRegistrationError(
                "Factory must provide a factory ID",
                context={"componentType": component_type},
            )

        key = (component_type, factory_id)
        if key in self._index:
            raise DuplicateFactoryError(component_type, factory_id)

        self._by_type.setdefault(component_type, []).append(factory)
        self._index[key] = factory
        logger.debug("Registered factory %s:%s", component_type, factory_id)

        if self._event_bus is not None:
            self._event_bus.emit(
                FactoryEvent.FACTORY_REGISTERED.value,
                FactoryRegisteredEvent(type=component_type, factory_id=factory_id),
            )

    def get_factory(self, component_type: str, factory_id: str) -> Optional[AnyFactory]:
        return self._index.get((component_type, factory_id))

    def get_factories_for_type(self, component_type: str) -> List[AnyFactory]:
        return list(self._by_type.get(component_type, ()))

    # ------------------------------------------------------------------
    def component_types(self) -> List[str]:
        """Return the registered component types in registration order."""
        return list(self._by_type)
