"""Redis storage adapter implementation."""

import re
from collections.abc import Sequence
from typing import Any

import redis.asyncio as redis

from keyvy.infrastructure.key_builders.namespace import NamespaceKeyBuilder

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


class RedisStorageAdapter:
    """Redis storage adapter for distributed deployments.

    Supports per-key TTL, native batch reads and writes, and
    namespace-scoped clearing. Suitable for multi-process and
    distributed deployments.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379",
        namespace: str | None = None,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis storage adapter.

        Args:
            url: Redis connection URL. Ignored when ``client`` is given.
            namespace: When set, ``clear`` only removes keys in this namespace.
            client: Pre-built Redis client to use instead of ``url``.
        """
        self._redis: redis.Redis = client if client is not None else redis.from_url(url)  # type: ignore
        self._namespace = namespace

    async def get(self, key: str) -> bytes | None:
        """Retrieve the raw stored value.

        Args:
            key: The physical key to retrieve.

        Returns:
            The stored bytes, or None if absent or expired.
        """
        return await self._redis.get(key)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a raw value.

        Args:
            key: The physical key.
            value: The serialized value.
            ttl: Optional time-to-live in milliseconds.
        """
        if ttl is not None:
            await self._redis.set(key, value, px=ttl)
        else:
            await self._redis.set(key, value)

    async def delete(self, key: str) -> bool:
        """Delete a stored value.

        Args:
            key: The physical key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        result = await self._redis.delete(key)
        return result > 0

    async def clear(self) -> None:
        """Clear stored values.

        With a namespace only keys under ``namespace:`` are removed,
        otherwise the whole database is flushed.
        """
        if self._namespace is None:
            await self._redis.flushdb()
            return
        prefix = NamespaceKeyBuilder(self._namespace).prefix()
        await self._delete_by_pattern(_GLOB_SPECIAL.sub(r"\\\1", prefix) + "*")

    async def mget(
        self,
        keys: Sequence[str],
        *,
        concurrency: int | None = None,
    ) -> list[bytes | None]:
        """Retrieve several raw values with a single MGET.

        Args:
            keys: The physical keys to retrieve.
            concurrency: Ignored; MGET is a single round trip.

        Returns:
            Stored values (None when absent), ordered like ``keys``.
        """
        if not keys:
            return []
        return list(await self._redis.mget(list(keys)))

    async def mset(
        self,
        keys: Sequence[str],
        values: Sequence[Any],
        ttl: int | None = None,
        *,
        concurrency: int | None = None,
    ) -> None:
        """Store several raw values in one pipelined round trip.

        Args:
            keys: The physical keys.
            values: Serialized values, parallel to ``keys``.
            ttl: Optional time-to-live in milliseconds for every key.
            concurrency: Ignored; the pipeline is a single round trip.
        """
        if not keys:
            return
        async with self._redis.pipeline(transaction=False) as pipe:
            for key, value in zip(keys, values):
                if ttl is not None:
                    pipe.set(key, value, px=ttl)
                else:
                    pipe.set(key, value)
            await pipe.execute()

    async def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.

        Args:
            pattern: Redis glob pattern.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = await self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                deleted = await self._redis.delete(*keys)
                count += deleted

            if cursor == 0:
                break

        return count

    @property
    def namespace(self) -> str | None:
        """Return the namespace ``clear`` is scoped to."""
        return self._namespace

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisStorageAdapter":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
