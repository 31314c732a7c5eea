import pytest

from sandpad.core.container import ServiceContainer
from sandpad.core.exceptions import ServiceNotFoundError
from sandpad.core.interfaces.service_container import IServiceContainer


class Dummy:
    pass


def test_container_implements_interface():
    assert isinstance(ServiceContainer(), IServiceContainer)


def test_register_and_get_returns_same_instance():
    container = ServiceContainer()
    service = Dummy()
    container.register("dummy", service)

    assert container.get("dummy") is service
    assert container.has("dummy") is True


@pytest.mark.parametrize("service_id", ["missing", "storageAdapter", ""])
def test_get_unregistered_raises_with_id(service_id):
    container = ServiceContainer()

    with pytest.raises(ServiceNotFoundError) as exc_info:
        container.get(service_id)

    assert f"'{service_id}'" in str(exc_info.value)
    assert exc_info.value.service_id == service_id
    assert container.has(service_id) is False


def test_register_twice_overwrites():
    container = ServiceContainer()
    first, second = Dummy(), Dummy()
    container.register("dummy", first)
    container.register("dummy", second)

    assert container.get("dummy") is second
    assert len(container.registrations) == 1


def test_instances_are_stored_untyped():
    container = ServiceContainer()
    container.register("number", 42)
    container.register("none", None)

    assert container.get("number") == 42
    assert container.has("none") is True
    assert container.get("none") is None


def test_registrations_view_is_read_only():
    container = ServiceContainer()
    container.register("dummy", Dummy())

    with pytest.raises(TypeError):
        container.registrations["other"] = Dummy()  # type: ignore[index]
