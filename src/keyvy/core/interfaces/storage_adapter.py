"""Storage adapter interfaces."""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

ErrorHandler = Callable[[BaseException], Any]
Unsubscribe = Callable[[], None]


@runtime_checkable
class IStorageAdapter(Protocol):
    """Contract for storage adapters.

    All adapters must implement this protocol to be used with Keyv.
    Keys arrive already namespaced; values arrive already serialized.
    Methods are async to support both in-memory and networked stores.
    """

    async def get(self, key: str) -> Any | None:
        """Retrieve the raw stored value.

        Args:
            key: The physical key to retrieve.

        Returns:
            The raw stored value, or None if absent.
        """
        ...

    async def set(self, key: str, value: Any, ttl: int | None = None) -> Any:
        """Store a raw value, overwriting any previous one.

        Args:
            key: The physical key.
            value: The serialized value.
            ttl: Optional time-to-live in milliseconds. None means no expiry.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a stored value.

        Args:
            key: The physical key to delete.

        Returns:
            True if a key was removed, False otherwise.
        """
        ...

    async def clear(self) -> None:
        """Remove every key in the adapter's scope."""
        ...


@runtime_checkable
class IBatchReadable(Protocol):
    """Optional capability: native batch reads."""

    async def mget(
        self,
        keys: Sequence[str],
        *,
        concurrency: int | None = None,
    ) -> list[Any | None]:
        """Retrieve several raw values.

        Args:
            keys: The physical keys to retrieve.
            concurrency: Hint for adapters that fan out internally.

        Returns:
            Raw values (None when absent), ordered like ``keys``.
        """
        ...


@runtime_checkable
class IBatchWritable(Protocol):
    """Optional capability: native batch writes."""

    async def mset(
        self,
        keys: Sequence[str],
        values: Sequence[Any],
        ttl: int | None = None,
        *,
        concurrency: int | None = None,
    ) -> Any:
        """Store several raw values.

        Args:
            keys: The physical keys.
            values: Serialized values, parallel to ``keys``.
            ttl: Optional time-to-live in milliseconds applied to every key.
            concurrency: Hint for adapters that fan out internally.
        """
        ...


@runtime_checkable
class IObservable(Protocol):
    """Optional capability: asynchronous error notifications."""

    def subscribe_errors(self, handler: ErrorHandler) -> Unsubscribe:
        """Register a handler for errors raised outside any call.

        Args:
            handler: Called with each reported error.

        Returns:
            A callable that removes the handler.
        """
        ...


@runtime_checkable
class IClosable(Protocol):
    """Optional capability: releasable resources (connections, pools)."""

    async def close(self) -> None:
        """Release adapter resources."""
        ...
