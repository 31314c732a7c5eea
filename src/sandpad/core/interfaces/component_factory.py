from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
TConfig = TypeVar("TConfig")

__all__ = ["IComponentFactory"]


class IComponentFactory(ABC, Generic[T, TConfig]):
    """Factory addressed by a (component type, factory id) pair."""

    @abstractmethod
    def create(self, config: TConfig) -> T:  # noqa: D401
        """Return a new component built from *config*."""

    @abstractmethod
    def get_component_type(self) -> str:  # noqa: D401
        """Return the component type this factory produces, e.g. ``math-widget``."""

    @abstractmethod
    def get_factory_id(self) -> str:  # noqa: D401
        """Return the implementation identifier, e.g. ``desmos``."""
