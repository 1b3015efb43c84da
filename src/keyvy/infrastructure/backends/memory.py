"""In-memory storage adapter implementation."""

import math
from collections.abc import Sequence
from typing import Any

from cachetools import LRUCache  # type: ignore[import-untyped]

from keyvy.infrastructure.key_builders.namespace import NamespaceKeyBuilder


class InMemoryStorageAdapter:
    """In-memory storage adapter.

    Suitable for single-process deployments and tests. Items are kept until
    they are deleted, cleared or evicted; the adapter-side ``ttl`` is
    accepted and ignored, so expiry is left entirely to the envelope
    checked by the facade on read. Unbounded unless ``maxsize`` is given,
    in which case the least recently used keys are evicted first.
    """

    def __init__(
        self,
        maxsize: float = math.inf,
        namespace: str | None = None,
    ) -> None:
        """Initialize the in-memory storage adapter.

        Args:
            maxsize: Maximum number of items held.
            namespace: When set, ``clear`` only removes keys in this namespace.
        """
        self._maxsize = maxsize
        self._namespace = namespace
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=maxsize)

    async def get(self, key: str) -> Any | None:
        """Retrieve the raw stored value.

        Args:
            key: The physical key to retrieve.

        Returns:
            The stored value, or None if absent.
        """
        return self._cache.get(key)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a raw value.

        Args:
            key: The physical key.
            value: The value to store.
            ttl: Accepted for the adapter contract; not enforced here.
        """
        self._cache[key] = value

    async def delete(self, key: str) -> bool:
        """Delete a stored value.

        Args:
            key: The physical key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        if key not in self._cache:
            return False
        del self._cache[key]
        return True

    async def clear(self) -> None:
        """Clear stored values.

        With a namespace only keys under ``namespace:`` are removed,
        otherwise everything is.
        """
        if self._namespace is None:
            self._cache.clear()
            return

        prefix = NamespaceKeyBuilder(self._namespace).prefix()
        for key in [k for k in list(self._cache.keys()) if k.startswith(prefix)]:
            self._cache.pop(key, None)

    async def mget(
        self,
        keys: Sequence[str],
        *,
        concurrency: int | None = None,
    ) -> list[Any | None]:
        """Retrieve several raw values in one pass.

        Args:
            keys: The physical keys to retrieve.
            concurrency: Ignored; reads are synchronous.

        Returns:
            Stored values (None when absent), ordered like ``keys``.
        """
        return [await self.get(key) for key in keys]

    async def mset(
        self,
        keys: Sequence[str],
        values: Sequence[Any],
        ttl: int | None = None,
        *,
        concurrency: int | None = None,
    ) -> None:
        """Store several raw values in one pass.

        Args:
            keys: The physical keys.
            values: Values, parallel to ``keys``.
            ttl: Accepted for the adapter contract; not enforced here.
            concurrency: Ignored; writes are synchronous.
        """
        for key, value in zip(keys, values):
            await self.set(key, value, ttl)

    def __len__(self) -> int:
        """Return the number of items held."""
        return len(self._cache)

    @property
    def maxsize(self) -> float:
        """Return the maximum size of the store."""
        return self._maxsize

    @property
    def namespace(self) -> str | None:
        """Return the namespace ``clear`` is scoped to."""
        return self._namespace
