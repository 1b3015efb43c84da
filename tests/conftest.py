"""Pytest configuration for keyvy tests."""

import asyncio
from typing import Any

import pytest

from keyvy import ErrorObservers, Keyv


class ManualClock:
    """Epoch-milliseconds clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingStorageAdapter:
    """Dict-backed adapter that records every call it receives.

    Implements only the required methods. ``delays`` maps a physical key
    to a number of seconds its ``get``/``set`` should take.
    """

    def __init__(self, delays: dict[str, float] | None = None) -> None:
        self.data: dict[str, Any] = {}
        self.ttls: dict[str, int | None] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.delays = delays or {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def _pause(self, key: str) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(key, 0))
        finally:
            self.in_flight -= 1

    async def get(self, key: str) -> Any | None:
        self.calls.append(("get", key))
        await self._pause(key)
        return self.data.get(key)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        self.calls.append(("set", key, ttl))
        await self._pause(key)
        self.data[key] = value
        self.ttls[key] = ttl

    async def delete(self, key: str) -> bool:
        self.calls.append(("delete", key))
        self.ttls.pop(key, None)
        return self.data.pop(key, None) is not None

    async def clear(self) -> None:
        self.calls.append(("clear",))
        self.data.clear()
        self.ttls.clear()

    def called(self, op: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == op]


class BatchRecordingStorageAdapter(RecordingStorageAdapter):
    """Recording adapter that also offers native batch reads and writes."""

    async def mget(self, keys: list[str], *, concurrency: int | None = None) -> list[Any]:
        self.calls.append(("mget", list(keys), concurrency))
        return [self.data.get(key) for key in keys]

    async def mset(
        self,
        keys: list[str],
        values: list[Any],
        ttl: int | None = None,
        *,
        concurrency: int | None = None,
    ) -> None:
        self.calls.append(("mset", list(keys), ttl, concurrency))
        for key, value in zip(keys, values):
            self.data[key] = value
            self.ttls[key] = ttl


class ObservableStorageAdapter(RecordingStorageAdapter):
    """Recording adapter that reports errors through a notification channel."""

    def __init__(self) -> None:
        super().__init__()
        self.errors = ErrorObservers()
        self.closed = False

    def subscribe_errors(self, handler):
        return self.errors.subscribe(handler)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> ManualClock:
    """Create a manual clock."""
    return ManualClock()


@pytest.fixture
def store() -> RecordingStorageAdapter:
    """Create a recording adapter without batch support."""
    return RecordingStorageAdapter()


@pytest.fixture
def batch_store() -> BatchRecordingStorageAdapter:
    """Create a recording adapter with batch support."""
    return BatchRecordingStorageAdapter()


@pytest.fixture
def keyv(store: RecordingStorageAdapter, clock: ManualClock) -> Keyv:
    """Create a facade over the recording adapter."""
    return Keyv(store=store, clock=clock)


@pytest.fixture
def observable_store() -> ObservableStorageAdapter:
    """Create a recording adapter with an error channel and close()."""
    return ObservableStorageAdapter()
