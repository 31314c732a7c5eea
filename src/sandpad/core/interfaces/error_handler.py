from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..exceptions import ErrorCategory

__all__ = ["IErrorHandler", "RecoveryStrategy"]

RecoveryStrategy = Callable[[Any], None]


class IErrorHandler(ABC):
    """Single funnel every component reports failures through.

    Implementations are terminal: none of these methods may raise.
    """

    @abstractmethod
    def handle(self, error: BaseException) -> None:  # noqa: D401
        """Normalise, log and broadcast *error*."""

    @abstractmethod
    def create_and_handle(self, category: ErrorCategory, message: str, details: Any = None) -> None:  # noqa: D401
        """Build a structured error and route it through :meth:`handle`."""

    @abstractmethod
    def handle_iframe_error(self, source: Any, message: str, details: Any = None) -> None:  # noqa: D401
        """Report a failure raised inside a sandboxed frame."""

    @abstractmethod
    def handle_math_api_error(self, api_type: str, message: str, details: Any = None) -> None:  # noqa: D401
        """Report a failure raised by a third-party math visualisation API."""

    @abstractmethod
    def attempt_recovery(self, category: ErrorCategory, context: Any) -> bool:  # noqa: D401
        """Return *True* if a recovery strategy for *category* was attempted."""
