"""Event names and payload models published on the event bus."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ErrorCategory

__all__ = [
    "ErrorEventType",
    "FactoryEvent",
    "ErrorEvent",
    "IframeErrorEvent",
    "MathApiErrorEvent",
    "RecoveryEvent",
    "ComponentCreatedEvent",
    "ComponentCreateFailedEvent",
    "FactoryRegisteredEvent",
    "FactoryRegistrationFailedEvent",
]


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorEventType(str, Enum):
    ERROR_OCCURRED = "error:occurred"
    COMPONENT_ERROR = "error:component"
    NETWORK_ERROR = "error:network"
    VALIDATION_ERROR = "error:validation"
    IFRAME_ERROR = "error:iframe"
    FACTORY_ERROR = "error:factory"
    MATH_API_ERROR = "error:math-api"
    RECOVERY_ATTEMPT = "error:recovery"


class FactoryEvent(str, Enum):
    COMPONENT_CREATED = "component:created"
    COMPONENT_CREATE_FAILED = "component:createFailed"
    FACTORY_REGISTERED = "factory:registered"
    FACTORY_REGISTRATION_FAILED = "factory:registrationFailed"


class _Event(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    timestamp: datetime = Field(default_factory=_now)


# ---------------------------------------------------------------------------
# Error events
# ---------------------------------------------------------------------------


class ErrorEvent(_Event):
    type: ErrorCategory
    message: str
    details: Any = None


class IframeErrorEvent(_Event):
    source: str
    message: str
    details: Any = None


class MathApiErrorEvent(_Event):
    api_type: str
    message: str
    details: Any = None


class RecoveryEvent(_Event):
    error_type: ErrorCategory
    context: Any = None
    succeeded: bool = True


# ---------------------------------------------------------------------------
# Factory events
# ---------------------------------------------------------------------------


class ComponentCreatedEvent(_Event):
    """Published after a factory produced a component.

    Factories may attach additional keys, hence ``extra="allow"``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    type: str
    id: str
    factory_id: str


class ComponentCreateFailedEvent(_Event):
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    type: str
    factory_id: str
    error: str


class FactoryRegisteredEvent(_Event):
    type: str
    factory_id: str


class FactoryRegistrationFailedEvent(_Event):
    factory_info: str
    error: str
