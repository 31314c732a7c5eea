"""Application bootstrap.

:func:`build_container` wires exactly one event bus, error handler,
service container and factory registry into a
:class:`FactoryEnabledServiceContainer` and returns it. The caller owns
the result; nothing is kept in module globals.

>>> from sandpad.core.bootstrap import ServiceIds, build_container
>>> container = build_container()
>>> handler = container.get(ServiceIds.ERROR_HANDLER)
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .config import ConfigurationService, SandpadSettings, load_settings
from .container import ServiceContainer
from .factories.registry import FactoryRegistry
from .factory_container import FactoryEnabledServiceContainer
from .interfaces.component_factory import IComponentFactory
from .services.error_handler import ErrorHandler, Notifier
from .services.event_bus import EventBus

logger = logging.getLogger("sandpad")

__all__ = ["MATH_WIDGET", "ServiceIds", "build_container"]

MATH_WIDGET = "math-widget"


class ServiceIds:
    """Identifiers of the services registered by :func:`build_container`."""

    SETTINGS = "settings"
    CONFIG = "config"
    EVENT_BUS = "eventBus"
    ERROR_HANDLER = "errorHandler"
    FACTORY_REGISTRY = "factoryRegistry"


def build_container(
    settings: Optional[SandpadSettings] = None,
    *,
    notifier: Optional[Notifier] = None,
    factories: Iterable[IComponentFactory[Any, Any]] = (),
) -> FactoryEnabledServiceContainer:
    if settings is None:
        settings = load_settings()
    config_service = ConfigurationService(settings=settings)

    event_bus = EventBus(debug=settings.event_debug)
    error_handler = ErrorHandler(
        event_bus=event_bus,
        notifier=notifier if settings.notify_errors else None,
    )
    registry = FactoryRegistry(event_bus=event_bus)
    container = FactoryEnabledServiceContainer(
        ServiceContainer(),
        registry,
        error_handler,
        event_bus=event_bus,
        preferred_factories={MATH_WIDGET: settings.default_math_api},
    )

    container.register(ServiceIds.SETTINGS, settings)
    container.register(ServiceIds.CONFIG, config_service)
    container.register(ServiceIds.EVENT_BUS, event_bus)
    container.register(ServiceIds.ERROR_HANDLER, error_handler)
    container.register(ServiceIds.FACTORY_REGISTRY, registry)

    for factory in factories:
        container.register_factory(factory)

    logger.info(
        "Container ready with %d factories",
        sum(len(registry.get_factories_for_type(t)) for t in registry.component_types()),
    )
    return container
