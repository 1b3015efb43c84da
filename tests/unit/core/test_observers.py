"""Tests for ErrorObservers."""

import logging

import pytest

from keyvy import ErrorObservers


class TestErrorObservers:
    """Tests for ErrorObservers."""

    def test_emit_to_all_handlers(self) -> None:
        """Test every handler receives the error."""
        observers = ErrorObservers()
        first: list[BaseException] = []
        second: list[BaseException] = []
        observers.subscribe(first.append)
        observers.subscribe(second.append)
        error = RuntimeError("connection lost")

        observers.emit(error)

        assert first == [error]
        assert second == [error]
        assert len(observers) == 2

    def test_async_handler_rejected(self) -> None:
        """Test coroutine functions cannot be registered."""
        observers = ErrorObservers()

        async def handler(error: BaseException) -> None:
            pass

        with pytest.raises(TypeError, match="synchronous"):
            observers.subscribe(handler)
        assert len(observers) == 0

    def test_unsubscribe(self) -> None:
        """Test an unsubscribed handler is no longer called."""
        observers = ErrorObservers()
        received: list[BaseException] = []
        unsubscribe = observers.subscribe(received.append)

        unsubscribe()
        unsubscribe()
        observers.emit(RuntimeError("ignored"))

        assert received == []
        assert len(observers) == 0

    def test_failing_handler_does_not_stop_others(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a raising handler is logged and the rest still run."""
        observers = ErrorObservers()
        received: list[BaseException] = []

        def broken(error: BaseException) -> None:
            raise ValueError("handler bug")

        observers.subscribe(broken)
        observers.subscribe(received.append)

        with caplog.at_level(logging.ERROR, logger="keyvy.core.services.observers"):
            observers.emit(RuntimeError("boom"))

        assert len(received) == 1
        assert "failed" in caplog.text

    def test_unobserved_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test errors without handlers are logged, not dropped."""
        observers = ErrorObservers()

        with caplog.at_level(logging.ERROR, logger="keyvy.core.services.observers"):
            observers.emit(RuntimeError("nobody listening"))

        assert "nobody listening" in caplog.text
