"""Core exception hierarchy for the sandpad editing tool.

Every failure that reaches the error handler is normalised into a
:class:`StructuredError` carrying an :class:`ErrorCategory`, a message and
arbitrary details. The narrower exceptions below are raised directly by
the container and the factory registry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

__all__ = [
    "SandpadError",
    "ErrorCategory",
    "StructuredError",
    "ConfigurationError",
    "ServiceNotFoundError",
    "FactoryRegistrationError",
    "DuplicateFactoryError",
    "FactoryNotFoundError",
    "ComponentCreationError",
]


class SandpadError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context: Dict[str, Any] = context or {}

    def __str__(self) -> str:  # pragma: no cover – thin wrapper
        return self.message


class ErrorCategory(str, Enum):
    """Closed set of error categories used for routing and recovery."""

    INITIALIZATION = "initialization"
    NETWORK = "network"
    STORAGE = "storage"
    VALIDATION = "validation"
    RUNTIME = "runtime"

    # Factory subsystem
    FACTORY = "factory"
    FACTORY_REGISTRATION = "factory-registration"
    COMPONENT_CREATION = "component-creation"

    # Third-party math visualisation APIs
    MATH_API = "math-api"

    @classmethod
    def coerce(cls, value: Any, default: Optional["ErrorCategory"] = None) -> "ErrorCategory":
        """Return *value* as a category, or *default* (RUNTIME) if it is not one."""
        try:
            return cls(value)
        except (TypeError, ValueError):
            return default or cls.RUNTIME


class StructuredError(SandpadError):
    """Normalised error shape: category + message + details."""

    name = "StructuredError"

    def __init__(self, category: ErrorCategory, message: str, details: Any = None) -> None:
        category = ErrorCategory(category)
        super().__init__(message, error_code=category.value)
        self.category = category
        self.details = details

    @classmethod
    def from_exception(cls, exc: BaseException) -> "StructuredError":
        """Return *exc* unchanged if structured, else wrap it as RUNTIME."""
        if isinstance(exc, StructuredError):
            return exc
        try:
            message = str(exc)
        except Exception:
            message = ""
        return cls(ErrorCategory.RUNTIME, message or type(exc).__name__)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.category.value!r}, {self.message!r}, {self.details!r})"


class ConfigurationError(SandpadError):
    """Raised when configuration is invalid or missing."""


class ServiceNotFoundError(SandpadError):
    """Raised when a requested service is not registered in the container."""

    def __init__(self, service_id: str) -> None:
        super().__init__(
            f"Service '{service_id}' not registered",
            error_code="service-not-found",
            context={"service_id": service_id},
        )
        self.service_id = service_id


class FactoryRegistrationError(SandpadError):
    """Raised when a factory cannot be added to the registry."""


class DuplicateFactoryError(FactoryRegistrationError):
    """Raised when a (component type, factory id) pair is already taken."""

    def __init__(self, component_type: str, factory_id: str) -> None:
        super().__init__(
            f"Factory with ID '{factory_id}' is already registered "
            f"for component type '{component_type}'",
            error_code="duplicate-factory",
            context={"componentType": component_type, "factoryId": factory_id},
        )
        self.component_type = component_type
        self.factory_id = factory_id


class FactoryNotFoundError(StructuredError):
    """Raised by the composition layer when a factory lookup misses."""

    def __init__(self, component_type: str, factory_id: Optional[str] = None) -> None:
        if factory_id is None:
            message = f"No factories registered for component type: {component_type}"
        else:
            message = f"Factory not found: {component_type}:{factory_id}"
        super().__init__(
            ErrorCategory.FACTORY,
            message,
            {"componentType": component_type, "factoryId": factory_id},
        )
        self.component_type = component_type
        self.factory_id = factory_id


class ComponentCreationError(StructuredError):
    """Raised when a factory fails to produce its component."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(ErrorCategory.COMPONENT_CREATION, message, details)
