from .error_handler import ErrorHandler, Notifier
from .event_bus import EventBus

__all__ = ["ErrorHandler", "EventBus", "Notifier"]
