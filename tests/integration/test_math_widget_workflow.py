"""End-to-end: bootstrap, register math-widget adapters, resolve and fail."""

import logging

import pytest

from sandpad.core.bootstrap import ServiceIds, build_container
from sandpad.core.config import SandpadSettings
from sandpad.core.events import ErrorEventType
from sandpad.core.exceptions import ErrorCategory, FactoryNotFoundError


@pytest.fixture()
def container():
    return build_container(SandpadSettings(_env_file=None))


def test_math_widget_adapters(container, make_factory, caplog):
    desmos = make_factory("math-widget", "desmos")
    geogebra = make_factory("math-widget", "geogebra")
    container.register_factory(desmos)
    container.register_factory(geogebra)

    observed = []
    container.get(ServiceIds.EVENT_BUS).on(ErrorEventType.ERROR_OCCURRED.value, observed.append)

    assert container.get_factories_for_type("math-widget") == [desmos, geogebra]
    assert container.get_factory("math-widget", "geogebra") is geogebra

    with caplog.at_level(logging.ERROR, logger="sandpad"):
        with pytest.raises(FactoryNotFoundError):
            container.get_factory("math-widget", "wolfram")

    [event] = observed
    assert event.type is ErrorCategory.FACTORY
    assert event.details["componentType"] == "math-widget"
    assert event.details["factoryId"] == "wolfram"
    assert "[factory] Factory not found: math-widget:wolfram" in caplog.text


def test_default_adapter_from_settings(container, make_factory):
    container.register_factory(make_factory("math-widget", "geogebra"))
    container.register_factory(make_factory("math-widget", "desmos"))

    preferred = container.get(ServiceIds.CONFIG).get("default_math_api")
    widget = container.create_component("math-widget", preferred, {"container_id": "graph"})

    assert widget["factory"] == "desmos"
    assert container.get_default_factory("math-widget").get_factory_id() == "desmos"


def test_recovery_hook_for_math_api(container):
    handler = container.get(ServiceIds.ERROR_HANDLER)
    reloads = []

    assert handler.attempt_recovery(ErrorCategory.MATH_API, {"apiType": "desmos"}) is False

    handler.register_recovery_strategy(ErrorCategory.MATH_API, reloads.append)
    handler.handle_math_api_error("desmos", "calculator not ready")

    assert handler.attempt_recovery(ErrorCategory.MATH_API, {"apiType": "desmos"}) is True
    assert reloads == [{"apiType": "desmos"}]
