"""In-process event bus used for error and factory notifications."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..interfaces.event_bus import EventCallback, IEventBus, Unsubscribe

logger = logging.getLogger("sandpad")

__all__ = ["EventBus"]


class EventBus(IEventBus):
    """Synchronous publish/subscribe bus.

    Listeners run in subscription order. A listener that raises is logged
    and skipped; the remaining listeners still receive the event.
    """

    def __init__(self, *, debug: bool = False) -> None:
        self._listeners: Dict[str, List[EventCallback]] = {}
        self._debug = debug

    # ------------------------------------------------------------------
    def on(self, event: str, callback: EventCallback) -> Unsubscribe:
        self._listeners.setdefault(event, []).append(callback)
        return lambda: self.off(event, callback)

    def off(self, event: str, callback: EventCallback) -> None:
        listeners = self._listeners.get(event)
        if not listeners:
            return
        remaining = [cb for cb in listeners if cb is not callback]
        if remaining:
            self._listeners[event] = remaining
        else:
            del self._listeners[event]

    def once(self, event: str, callback: EventCallback) -> Unsubscribe:
        def _once(payload: Any) -> None:
            unsubscribe()
            callback(payload)

        unsubscribe = self.on(event, _once)
        return unsubscribe

    def emit(self, event: str, payload: Any = None) -> None:
        if self._debug:
            logger.debug("Event '%s' emitted: %r", event, payload)
        # Copy so listeners may unsubscribe while being notified.
        for callback in list(self._listeners.get(event, ())):
            try:
                callback(payload)
            except Exception:
                logger.exception("Error in event listener for '%s'", event)

    # ------------------------------------------------------------------
    def has_listeners(self, event: str) -> bool:
        return bool(self._listeners.get(event))

    def active_events(self) -> List[str]:
        return sorted(self._listeners)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))

    def clear_event(self, event: str) -> None:
        self._listeners.pop(event, None)

    def clear_all_events(self) -> None:
        self._listeners.clear()

    def set_debug_mode(self, enabled: bool) -> None:
        self._debug = enabled
