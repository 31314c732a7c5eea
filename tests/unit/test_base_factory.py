from dataclasses import dataclass
from typing import Optional
from unittest.mock import MagicMock

import pytest

from sandpad.core.events import ComponentCreatedEvent, ComponentCreateFailedEvent, FactoryEvent
from sandpad.core.exceptions import ComponentCreationError, ErrorCategory, StructuredError
from sandpad.core.factories.base_factory import BaseComponentFactory


@dataclass
class WidgetConfig:
    container_id: Optional[str] = None
    expression: str = "y=x"


class GraphWidget:
    def __init__(self, config: WidgetConfig) -> None:
        self.config = config


class DesmosWidgetFactory(BaseComponentFactory[GraphWidget, WidgetConfig]):
    def get_component_type(self) -> str:
        return "math-widget"

    def get_factory_id(self) -> str:
        return "desmos"

    def get_supported_features(self):
        return ["graphing", "sliders"]

    def validate_config(self, config: WidgetConfig) -> None:
        super().validate_config(config)
        if not config.container_id:
            raise StructuredError(
                ErrorCategory.VALIDATION,
                "Widget container ID is required",
                {"factoryId": self.get_factory_id()},
            )

    def create_component(self, config: WidgetConfig) -> GraphWidget:
        if config.expression == "crash":
            raise RuntimeError("calculator API not loaded")
        return GraphWidget(config)


@pytest.fixture()
def factory(mock_error_handler, event_bus):
    return DesmosWidgetFactory(mock_error_handler, event_bus)


def test_create_returns_component_and_publishes(factory, recorded_events, mock_error_handler):
    widget = factory.create(WidgetConfig(container_id="graph-1"))

    assert isinstance(widget, GraphWidget)
    [(name, payload)] = recorded_events
    assert name == FactoryEvent.COMPONENT_CREATED.value
    assert isinstance(payload, ComponentCreatedEvent)
    assert (payload.type, payload.id, payload.factory_id) == ("math-widget", "graph-1", "desmos")
    mock_error_handler.handle.assert_not_called()


def test_none_config_is_a_validation_error(factory, mock_error_handler, recorded_events):
    with pytest.raises(StructuredError) as exc_info:
        factory.create(None)  # type: ignore[arg-type]

    assert exc_info.value.category is ErrorCategory.VALIDATION
    mock_error_handler.handle.assert_called_once_with(exc_info.value)
    [(name, _)] = recorded_events
    assert name == FactoryEvent.COMPONENT_CREATE_FAILED.value


def test_subclass_validation_runs(factory, mock_error_handler):
    with pytest.raises(StructuredError, match="container ID"):
        factory.create(WidgetConfig())

    assert mock_error_handler.handle.call_count == 1


def test_plain_failure_becomes_component_creation_error(factory, mock_error_handler, recorded_events):
    config = WidgetConfig(container_id="graph-1", expression="crash")

    with pytest.raises(ComponentCreationError) as exc_info:
        factory.create(config)

    error = exc_info.value
    assert error.category is ErrorCategory.COMPONENT_CREATION
    assert "calculator API not loaded" in error.message
    assert error.details == {"componentType": "math-widget", "factoryId": "desmos", "config": config}
    assert isinstance(error.__cause__, RuntimeError)
    mock_error_handler.handle.assert_called_once_with(error)

    [(name, payload)] = recorded_events
    assert isinstance(payload, ComponentCreateFailedEvent)
    assert payload.error == "calculator API not loaded"


def test_works_without_event_bus(mock_error_handler):
    factory = DesmosWidgetFactory(mock_error_handler)

    assert factory.create(WidgetConfig(container_id="graph")).config.container_id == "graph"


def test_dict_config_container_id(mock_error_handler, event_bus, recorded_events):
    class DictFactory(DesmosWidgetFactory):
        def validate_config(self, config):
            BaseComponentFactory.validate_config(self, config)

        def create_component(self, config):
            return GraphWidget(config)

    DictFactory(mock_error_handler, event_bus).create({"container_id": "panel"})

    [(_, payload)] = recorded_events
    assert payload.id == "panel"


def test_unknown_container_id(mock_error_handler, event_bus, recorded_events):
    class NoIdFactory(DesmosWidgetFactory):
        def validate_config(self, config):
            pass

    NoIdFactory(mock_error_handler, event_bus).create(WidgetConfig())

    [(_, payload)] = recorded_events
    assert payload.id == "unknown"


def test_event_publish_failure_is_reported_not_raised(mock_error_handler):
    bus = MagicMock()
    bus.emit.side_effect = RuntimeError("bus down")
    factory = DesmosWidgetFactory(mock_error_handler, bus)

    widget = factory.create(WidgetConfig(container_id="graph"))

    assert isinstance(widget, GraphWidget)
    [error] = [call.args[0] for call in mock_error_handler.handle.call_args_list]
    assert error.category is ErrorCategory.FACTORY


def test_supported_features(factory):
    assert factory.get_supported_features() == ["graphing", "sliders"]
