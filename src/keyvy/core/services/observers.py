"""Error observer registration."""

import inspect
import logging

from keyvy.core.interfaces.storage_adapter import ErrorHandler, Unsubscribe

_logger = logging.getLogger(__name__)


class ErrorObservers:
    """A list of error handlers that can be notified together.

    Used by the facade to re-emit errors an adapter reports outside of
    any call, and available to adapters implementing ``IObservable``.
    """

    def __init__(self) -> None:
        self._handlers: list[ErrorHandler] = []

    def subscribe(self, handler: ErrorHandler) -> Unsubscribe:
        """Register a handler.

        Args:
            handler: Called with each emitted error.

        Returns:
            A callable that removes the handler again.

        Raises:
            TypeError: If ``handler`` is a coroutine function.
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(f"Error handler {handler!r} must be synchronous")
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def emit(self, error: BaseException) -> None:
        """Notify every handler of ``error``.

        A failing handler is logged and does not stop the others. With no
        handler registered the error is logged instead of being dropped.
        """
        if not self._handlers:
            _logger.error("Unobserved storage adapter error: %r", error, exc_info=error)
            return

        for handler in list(self._handlers):
            try:
                handler(error)
            except Exception:
                _logger.exception("Error handler %r failed", handler)

    def __len__(self) -> int:
        return len(self._handlers)
