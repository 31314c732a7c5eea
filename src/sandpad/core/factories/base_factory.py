"""Abstract base for concrete component factories.

Concrete factories (editor, preview, math-widget adapters) subclass
:class:`BaseComponentFactory`, declare their type and id and implement
:meth:`BaseComponentFactory.create_component`. The base class validates
the configuration, publishes creation events and routes creation
failures through the error handler before re-raising them.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Dict, List, NoReturn, Optional, TypeVar

from ..events import ComponentCreatedEvent, ComponentCreateFailedEvent, FactoryEvent
from ..exceptions import ComponentCreationError, ErrorCategory, StructuredError
from ..interfaces.component_factory import IComponentFactory
from ..interfaces.error_handler import IErrorHandler
from ..interfaces.event_bus import IEventBus

logger = logging.getLogger("sandpad")

T = TypeVar("T")
TConfig = TypeVar("TConfig")

__all__ = ["BaseComponentFactory"]


def _container_id(config: Any) -> str:
    if isinstance(config, dict):
        return str(config.get("container_id") or "unknown")
    return str(getattr(config, "container_id", None) or "unknown")


class BaseComponentFactory(IComponentFactory[T, TConfig]):
    """Common plumbing shared by every factory implementation."""

    def __init__(self, error_handler: IErrorHandler, event_bus: Optional[IEventBus] = None) -> None:
        self.error_handler = error_handler
        self.event_bus = event_bus

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------
    @abstractmethod
    def create_component(self, config: TConfig) -> T:  # noqa: D401
        """Build the component; *config* has already been validated."""

    def validate_config(self, config: TConfig) -> None:
        if config is None:
            raise StructuredError(
                ErrorCategory.VALIDATION,
                f"{self.get_component_type()} configuration is required",
                {"factoryId": self.get_factory_id()},
            )

    def get_supported_features(self) -> List[str]:
        return []

    # ------------------------------------------------------------------
    # IComponentFactory implementation
    # ------------------------------------------------------------------
    def create(self, config: TConfig) -> T:
        return self.build(config)

    def build(self, config: TConfig) -> T:
        try:
            self.validate_config(config)
            component = self.create_component(config)
        except Exception as exc:
            self._handle_creation_error(exc, config)
        self._publish_created(config)
        return component

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _publish_created(self, config: TConfig, **extra: Any) -> None:
        if self.event_bus is None:
            return
        try:
            self.event_bus.emit(
                FactoryEvent.COMPONENT_CREATED.value,
                ComponentCreatedEvent(
                    type=self.get_component_type(),
                    id=_container_id(config),
                    factory_id=self.get_factory_id(),
                    **extra,
                ),
            )
        except Exception as exc:
            self.error_handler.handle(
                StructuredError(
                    ErrorCategory.FACTORY,
                    f"Failed to publish component creation event: {exc}",
                    self._identity(),
                )
            )

    def _publish_create_failed(self, error: BaseException, config: TConfig) -> None:
        if self.event_bus is None:
            return
        try:
            self.event_bus.emit(
                FactoryEvent.COMPONENT_CREATE_FAILED.value,
                ComponentCreateFailedEvent(
                    type=self.get_component_type(),
                    factory_id=self.get_factory_id(),
                    error=str(error),
                    config=config,
                ),
            )
        except Exception:
            logger.exception("Failed to publish component creation failure")

    def _handle_creation_error(self, error: Exception, config: TConfig) -> NoReturn:
        self._publish_create_failed(error, config)

        if isinstance(error, StructuredError):
            structured = error
        else:
            structured = ComponentCreationError(
                f"Failed to create {self.get_component_type()} component: {error}",
                {**self._identity(), "config": config},
            )
        self.error_handler.handle(structured)
        if structured is error:
            raise error
        raise structured from error

    def _identity(self) -> Dict[str, str]:
        return {"componentType": self.get_component_type(), "factoryId": self.get_factory_id()}
