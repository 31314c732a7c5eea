"""Composition layer: service container, factory registry and error handling."""

from .bootstrap import ServiceIds, build_container
from .container import ServiceContainer
from .exceptions import (
    ComponentCreationError,
    ConfigurationError,
    DuplicateFactoryError,
    ErrorCategory,
    FactoryNotFoundError,
    FactoryRegistrationError,
    SandpadError,
    ServiceNotFoundError,
    StructuredError,
)
from .factories import BaseComponentFactory, FactoryRegistry
from .factory_container import FactoryEnabledServiceContainer
from .services import ErrorHandler, EventBus

__all__ = [
    "BaseComponentFactory",
    "ComponentCreationError",
    "ConfigurationError",
    "DuplicateFactoryError",
    "ErrorCategory",
    "ErrorHandler",
    "EventBus",
    "FactoryEnabledServiceContainer",
    "FactoryNotFoundError",
    "FactoryRegistrationError",
    "FactoryRegistry",
    "SandpadError",
    "ServiceContainer",
    "ServiceIds",
    "ServiceNotFoundError",
    "StructuredError",
    "build_container",
]
