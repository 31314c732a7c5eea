from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from .events import FactoryEvent, FactoryRegistrationFailedEvent
from .exceptions import (
    ComponentCreationError,
    ErrorCategory,
    FactoryNotFoundError,
    StructuredError,
)
from .factories.base_factory import BaseComponentFactory
from .interfaces.component_factory import IComponentFactory
from .interfaces.error_handler import IErrorHandler
from .interfaces.event_bus import IEventBus
from .interfaces.factory_container import IFactoryEnabledContainer
from .interfaces.factory_registry import IFactoryRegistry
from .interfaces.service_container import IServiceContainer

logger = logging.getLogger("sandpad")

__all__ = ["FactoryEnabledServiceContainer"]

AnyFactory = IComponentFactory[Any, Any]


def _describe(factory: Any) -> tuple[str, str]:
    try:
        return factory.get_component_type() or "unknown", factory.get_factory_id() or "unknown"
    except Exception:
        return "unknown", "unknown"


class FactoryEnabledServiceContainer(IFactoryEnabledContainer):
    """Service container decorated with factory registration and lookup.

    Plain service operations are delegated unchanged to the wrapped
    container. Factory failures are reported through the error handler
    and then raised to the caller; nothing is swallowed here.
    """

    def __init__(
        self,
        base_container: IServiceContainer,
        factory_registry: IFactoryRegistry,
        error_handler: IErrorHandler,
        *,
        event_bus: Optional[IEventBus] = None,
        preferred_factories: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._base = base_container
        self._registry = factory_registry
        self._error_handler = error_handler
        self._event_bus = event_bus
        self._preferred: Dict[str, str] = dict(preferred_factories or {})

    # ------------------------------------------------------------------
    # IServiceContainer delegation
    # ------------------------------------------------------------------
    def register(self, service_id: str, instance: Any) -> None:
        self._base.register(service_id, instance)

    def get(self, service_id: str) -> Any:
        return self._base.get(service_id)

    def has(self, service_id: str) -> bool:
        return self._base.has(service_id)

    # ------------------------------------------------------------------
    # Factory operations
    # ------------------------------------------------------------------
    def register_factory(self, factory: AnyFactory) -> None:
        try:
            self._registry.register_factory(factory)
        except Exception as exc:
            component_type, factory_id = _describe(factory)
            self._error_handler.handle(
                StructuredError(
                    ErrorCategory.FACTORY_REGISTRATION,
                    f"Service container failed to register factory: {exc}",
                    {"componentType": component_type, "factoryId": factory_id},
                )
            )
            if self._event_bus is not None:
                self._event_bus.emit(
                    FactoryEvent.FACTORY_REGISTRATION_FAILED.value,
                    FactoryRegistrationFailedEvent(
                        factory_info=f"{component_type}:{factory_id}", error=str(exc)
                    ),
                )
            raise

    def get_factory(self, component_type: str, factory_id: str) -> AnyFactory:
        factory = self._registry.get_factory(component_type, factory_id)
        if factory is None:
            error = FactoryNotFoundError(component_type, factory_id)
            self._error_handler.handle(error)
            raise error
        return factory

    def get_factories_for_type(self, component_type: str) -> List[AnyFactory]:
        return self._registry.get_factories_for_type(component_type)

    def get_default_factory(self, component_type: str) -> AnyFactory:
        """Return the default factory for *component_type*.

        The preferred factory id configured for the type wins when it is
        registered; otherwise the first registered factory is used.
        """
        preferred = self._preferred.get(component_type)
        if preferred is not None:
            factory = self._registry.get_factory(component_type, preferred)
            if factory is not None:
                return factory
            logger.warning(
                "Preferred %s factory '%s' is not registered; using the first one",
                component_type,
                preferred,
            )
        factories = self.get_factories_for_type(component_type)
        if not factories:
            error = FactoryNotFoundError(component_type)
            self._error_handler.handle(error)
            raise error
        return factories[0]

    def create_component(self, component_type: str, factory_id: str, config: Any = None) -> Any:
        """Look up the factory for the pair and build a component with it.

        A :class:`BaseComponentFactory` reports its own failures, so those
        are re-raised as is. Structured errors from any other factory are
        reported here; anything else is wrapped in a
        :class:`ComponentCreationError` and reported once.
        """
        factory = self.get_factory(component_type, factory_id)
        logger.debug("Creating %s component with factory %s", component_type, factory_id)
        try:
            return factory.create(config)
        except StructuredError as exc:
            if not isinstance(factory, BaseComponentFactory):
                self._error_handler.handle(exc)
            raise
        except Exception as exc:
            error = ComponentCreationError(
                f"Failed to create {component_type} component: {exc}",
                {"componentType": component_type, "factoryId": factory_id},
            )
            self._error_handler.handle(error)
            raise error from exc

    # ------------------------------------------------------------------
    @property
    def error_handler(self) -> IErrorHandler:
        return self._error_handler
