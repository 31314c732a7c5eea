from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List

__all__ = ["IEventBus", "EventCallback", "Unsubscribe"]

EventCallback = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class IEventBus(ABC):
    """Synchronous publish/subscribe channel."""

    @abstractmethod
    def on(self, event: str, callback: EventCallback) -> Unsubscribe:  # noqa: D401
        """Subscribe *callback* to *event* and return an unsubscribe hook."""

    @abstractmethod
    def off(self, event: str, callback: EventCallback) -> None:  # noqa: D401
        """Remove *callback* from *event*."""

    @abstractmethod
    def once(self, event: str, callback: EventCallback) -> Unsubscribe:  # noqa: D401
        """Subscribe *callback* for a single delivery of *event*."""

    @abstractmethod
    def emit(self, event: str, payload: Any = None) -> None:  # noqa: D401
        """Deliver *payload* to every listener of *event*."""

    @abstractmethod
    def has_listeners(self, event: str) -> bool:  # noqa: D401
        """Return *True* if *event* has at least one listener."""

    @abstractmethod
    def active_events(self) -> List[str]:  # noqa: D401
        """Return the names of events that currently have listeners."""

    @abstractmethod
    def listener_count(self, event: str) -> int:  # noqa: D401
        """Return how many listeners *event* currently has."""

    @abstractmethod
    def clear_event(self, event: str) -> None:  # noqa: D401
        """Drop every listener of *event*."""

    @abstractmethod
    def clear_all_events(self) -> None:  # noqa: D401
        """Drop every listener of every event."""
