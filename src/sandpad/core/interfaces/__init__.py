"""Abstract interfaces consumed and exposed by the composition layer."""

from .component_factory import IComponentFactory
from .config_service import IConfigurationService
from .error_handler import IErrorHandler, RecoveryStrategy
from .event_bus import EventCallback, IEventBus, Unsubscribe
from .factory_container import IFactoryEnabledContainer
from .factory_registry import IFactoryRegistry
from .service_container import IServiceContainer

__all__ = [
    "IComponentFactory",
    "IConfigurationService",
    "IErrorHandler",
    "RecoveryStrategy",
    "IEventBus",
    "EventCallback",
    "Unsubscribe",
    "IFactoryEnabledContainer",
    "IFactoryRegistry",
    "IServiceContainer",
]
