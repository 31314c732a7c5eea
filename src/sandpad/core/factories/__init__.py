from .base_factory import BaseComponentFactory
from .registry import FactoryRegistry

__all__ = ["BaseComponentFactory", "FactoryRegistry"]
