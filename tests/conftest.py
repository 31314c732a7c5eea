from typing import Any
from unittest.mock import MagicMock

import pytest

from sandpad.core.interfaces.component_factory import IComponentFactory
from sandpad.core.interfaces.error_handler import IErrorHandler
from sandpad.core.services.error_handler import ErrorHandler
from sandpad.core.services.event_bus import EventBus


class StubFactory(IComponentFactory):
    """Minimal factory standing in for a math-widget or editor adapter."""

    def __init__(self, component_type: str, factory_id: str) -> None:  # noqa: D401
        self.component_type = component_type
        self.factory_id = factory_id
        self.configs: list[Any] = []

    def create(self, config: Any) -> dict:  # noqa: D401
        self.configs.append(config)
        return {"type": self.component_type, "factory": self.factory_id, "config": config}

    def get_component_type(self) -> str:  # noqa: D401
        return self.component_type

    def get_factory_id(self) -> str:  # noqa: D401
        return self.factory_id

    def __repr__(self) -> str:
        return f"StubFactory({self.component_type}:{self.factory_id})"


@pytest.fixture()
def make_factory():
    return StubFactory


@pytest.fixture()
def event_bus():
    return EventBus()


@pytest.fixture()
def error_handler(event_bus):
    return ErrorHandler(event_bus=event_bus)


@pytest.fixture()
def mock_error_handler():
    """Records every reported error without logging it."""
    return MagicMock(spec=IErrorHandler)


@pytest.fixture()
def recorded_events(event_bus):
    """Subscribe to every known event name and collect (name, payload)."""
    from sandpad.core.events import ErrorEventType, FactoryEvent

    seen: list[tuple[str, Any]] = []
    for name in [*ErrorEventType, *FactoryEvent]:
        event_bus.on(name.value, lambda payload, _n=name.value: seen.append((_n, payload)))
    return seen
