"""Centralised error handling.

Every component reports failures through :class:`ErrorHandler`. The
handler normalises the failure into a :class:`StructuredError`, writes it
to the ``sandpad`` logger, optionally surfaces it through a user-facing
notifier and broadcasts it on the event bus. It is the terminal sink: no
public method raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from ..events import (
    ErrorEvent,
    ErrorEventType,
    IframeErrorEvent,
    MathApiErrorEvent,
    RecoveryEvent,
)
from ..exceptions import ErrorCategory, StructuredError
from ..interfaces.error_handler import IErrorHandler, RecoveryStrategy
from ..interfaces.event_bus import IEventBus

__all__ = ["ErrorHandler", "Notifier"]

Notifier = Callable[[str, str], None]

_TYPED_EVENTS: Dict[ErrorCategory, ErrorEventType] = {
    ErrorCategory.NETWORK: ErrorEventType.NETWORK_ERROR,
    ErrorCategory.VALIDATION: ErrorEventType.VALIDATION_ERROR,
    ErrorCategory.FACTORY: ErrorEventType.FACTORY_ERROR,
    ErrorCategory.FACTORY_REGISTRATION: ErrorEventType.FACTORY_ERROR,
    ErrorCategory.COMPONENT_CREATION: ErrorEventType.FACTORY_ERROR,
}


def _merge_details(key: str, value: Any, details: Any) -> Dict[str, Any]:
    merged: Dict[str, Any] = {key: value}
    if isinstance(details, Mapping):
        merged.update(details)
    elif details is not None:
        merged["details"] = details
    return merged


def _iframe_identifier(source: Any) -> str:
    if isinstance(source, str):
        return source
    return getattr(source, "src", None) or "unknown-iframe"


class ErrorHandler(IErrorHandler):
    """Default :class:`IErrorHandler` implementation."""

    def __init__(
        self,
        *,
        event_bus: Optional[IEventBus] = None,
        notifier: Optional[Notifier] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._event_bus = event_bus
        self._notifier = notifier
        self._logger = logger or logging.getLogger("sandpad")
        self._strategies: Dict[ErrorCategory, RecoveryStrategy] = {}

    # ------------------------------------------------------------------
    # IErrorHandler implementation
    # ------------------------------------------------------------------
    def handle(self, error: BaseException) -> None:
        structured = StructuredError.from_exception(error)

        self._logger.error(
            "[%s] %s",
            structured.category.value,
            structured.message,
            extra={"category": structured.category.value, "details": structured.details},
        )
        self._notify(structured)

        if self._event_bus is not None:
            event = ErrorEvent(
                type=structured.category,
                message=structured.message,
                details=structured.details,
            )
            self._emit(ErrorEventType.ERROR_OCCURRED, event)
            typed = _TYPED_EVENTS.get(structured.category)
            if typed is not None:
                self._emit(typed, event)

    def create_and_handle(self, category: ErrorCategory, message: str, details: Any = None) -> None:
        self.handle(StructuredError(ErrorCategory.coerce(category), message, details))

    def handle_iframe_error(
        self,
        source: Any,
        message: str,
        details: Any = None,
        *,
        category: ErrorCategory = ErrorCategory.RUNTIME,
    ) -> None:
        """Report a failure from a sandboxed frame.

        *source* is either a string identifier or an element-like object
        whose ``src`` attribute identifies the frame. The identifier is
        kept under ``details["source"]`` so the failure can be traced back
        to the embedded widget.
        """
        identifier = _iframe_identifier(source)
        self.handle(
            StructuredError(
                ErrorCategory.coerce(category),
                f"Error in iframe: {message}",
                _merge_details("source", identifier, details),
            )
        )
        if self._event_bus is not None:
            self._emit(
                ErrorEventType.IFRAME_ERROR,
                IframeErrorEvent(source=identifier, message=message, details=details),
            )

    def handle_math_api_error(self, api_type: str, message: str, details: Any = None) -> None:
        """Report a failure from a math API such as ``desmos`` or ``geogebra``."""
        self.handle(
            StructuredError(
                ErrorCategory.MATH_API,
                f"Error in {api_type} API: {message}",
                _merge_details("apiType", api_type, details),
            )
        )
        if self._event_bus is not None:
            self._emit(
                ErrorEventType.MATH_API_ERROR,
                MathApiErrorEvent(api_type=api_type, message=message, details=details),
            )

    def attempt_recovery(self, category: ErrorCategory, context: Any) -> bool:
        """Run the recovery strategy registered for *category*.

        Returns *True* when a strategy exists and was run, regardless of
        whether it succeeded; *False* when nothing is registered.
        """
        strategy = self._strategies.get(category)
        if strategy is None:
            self._logger.debug("No recovery strategy registered for '%s'", getattr(category, "value", category))
            return False

        succeeded = True
        try:
            strategy(context)
        except Exception:
            succeeded = False
            self._logger.exception("Recovery strategy for '%s' failed", ErrorCategory(category).value)

        if self._event_bus is not None:
            self._emit(
                ErrorEventType.RECOVERY_ATTEMPT,
                RecoveryEvent(error_type=category, context=context, succeeded=succeeded),
            )
        return True

    # ------------------------------------------------------------------
    # Recovery strategy registration
    # ------------------------------------------------------------------
    def register_recovery_strategy(self, category: ErrorCategory, strategy: RecoveryStrategy) -> None:
        """Install *strategy* for *category*, replacing any previous one."""
        self._strategies[ErrorCategory(category)] = strategy

    def has_recovery_strategy(self, category: ErrorCategory) -> bool:
        return category in self._strategies

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _notify(self, error: StructuredError) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier("Error", error.message)
        except Exception:
            self._logger.exception("Error notifier failed")

    def _emit(self, event: ErrorEventType, payload: Any) -> None:
        try:
            self._event_bus.emit(event.value, payload)  # type: ignore[union-attr]
        except Exception:
            self._logger.exception("Failed to publish '%s'", event.value)
