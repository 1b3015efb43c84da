"""Keyv - the key-value facade orchestrating storage operations."""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from typing import Any

from keyvy.core.entities.entry import EntryState
from keyvy.core.entities.options import KeyvOptions
from keyvy.core.interfaces.key_builder import IKeyBuilder
from keyvy.core.interfaces.storage_adapter import (
    ErrorHandler,
    IBatchReadable,
    IBatchWritable,
    IClosable,
    IObservable,
    IStorageAdapter,
    Unsubscribe,
)
from keyvy.core.services.entry_codec import EntryCodec
from keyvy.core.services.expiration import ExpirationPolicy
from keyvy.core.services.observers import ErrorObservers
from keyvy.exceptions import ConfigurationError
from keyvy.infrastructure.key_builders.namespace import NamespaceKeyBuilder
from keyvy.infrastructure.registry import AdapterRegistry, default_registry
from keyvy.utils.clock import current_time_millis
from keyvy.utils.concurrency import concurrent_map

_logger = logging.getLogger(__name__)


class Keyv:
    """Uniform async key-value facade over a pluggable storage adapter.

    Namespaces keys, wraps values in an expiry envelope, applies lazy
    expiration on every read and runs batch operations with an optional
    concurrency bound while preserving input order.

    Example:
        keyv = Keyv(namespace="users", ttl=60_000)
        await keyv.set("alice", {"id": 1})
        await keyv.get("alice")  # {"id": 1}
    """

    def __init__(
        self,
        uri: "str | KeyvOptions | None" = None,
        options: KeyvOptions | None = None,
        *,
        registry: AdapterRegistry | None = None,
        clock: Callable[[], int] | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the facade.

        Args:
            uri: Connection URI, or a complete options record.
            options: Options record; ``uri`` and ``overrides`` take precedence.
            registry: Adapter registry used when no ``store`` is given.
                Defaults to the built-in adapters.
            clock: Source of epoch milliseconds, for expiry.
            **overrides: Individual ``KeyvOptions`` fields.

        Raises:
            ConfigurationError: If the options are invalid.
            AdapterNotFoundError: If the selected adapter is unknown.
        """
        if isinstance(uri, KeyvOptions):
            if options is not None:
                raise ConfigurationError("Options given both positionally and as 'options'")
            uri, options = None, uri

        self._options = KeyvOptions.merge(uri, options, **overrides)
        self._owns_store = self._options.store is None
        if self._owns_store:
            store = (registry or default_registry()).create(self._options)
            self._options = replace(self._options, store=store)
        else:
            _logger.debug("Using caller-supplied store %r", type(self._options.store).__name__)

        if not isinstance(self._options.store, IStorageAdapter):
            raise ConfigurationError(
                f"{type(self._options.store).__name__} does not implement the storage adapter interface"
            )
        self._store: IStorageAdapter = self._options.store

        clock = clock or current_time_millis
        self._key_builder: IKeyBuilder = NamespaceKeyBuilder(self._options.namespace)
        self._codec = EntryCodec(self._options.serializer, self._options.ttl, clock=clock)
        self._expiration = ExpirationPolicy(clock=clock)
        self._observers = ErrorObservers()

        self._store_subscription: Unsubscribe | None = None
        if isinstance(self._store, IObservable):
            self._store_subscription = self._store.subscribe_errors(self._observers.emit)

        # Statistics
        self._hits = 0
        self._misses = 0
        self._expired = 0

    @property
    def options(self) -> KeyvOptions:
        """Get the merged options."""
        return self._options

    @property
    def namespace(self) -> str:
        """Get the namespace."""
        return self._options.namespace

    @property
    def store(self) -> IStorageAdapter:
        """Get the storage adapter."""
        return self._store

    @property
    def stats(self) -> dict[str, int]:
        """Get read statistics.

        Returns:
            Dictionary with hits, misses (expired reads included),
            expired and total reads.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "expired": self._expired,
            "total": self._hits + self._misses,
        }

    def on_error(self, handler: ErrorHandler) -> Unsubscribe:
        """Observe errors the storage adapter reports asynchronously.

        Args:
            handler: Called with each error.

        Returns:
            A callable that removes the handler.

        Raises:
            TypeError: If ``handler`` is a coroutine function.
        """
        return self._observers.subscribe(handler)

    async def get(self, key: str, *, raw: bool = False) -> Any:
        """Read a value.

        Args:
            key: The logical key.
            raw: Return the full Entry instead of the bare value.

        Returns:
            The value (or Entry in raw mode), or None on a miss.
        """
        data = await self._store.get(self._key_builder.build(key))
        return await self._postprocess(key, data, raw)

    async def mget(
        self,
        keys: Sequence[str],
        *,
        raw: bool = False,
        concurrency: int | None = None,
    ) -> list[Any]:
        """Read several values, ordered like ``keys``.

        Uses the adapter's native batch read when it has one, otherwise
        issues single reads through the concurrency-limited mapper.

        Args:
            keys: The logical keys.
            raw: Return full Entries instead of bare values.
            concurrency: Override for the configured concurrency bound.

        Returns:
            One result per key; None for misses.
        """
        keys = list(keys)
        physical = [self._key_builder.build(key) for key in keys]
        limit = self._concurrency(concurrency)

        if isinstance(self._store, IBatchReadable):
            data = list(await self._store.mget(physical, concurrency=limit))
            # positions the adapter did not return are misses
            data.extend([None] * (len(keys) - len(data)))
        else:
            store = self._store

            async def read(physical_key: str, _: int) -> Any:
                return await store.get(physical_key)

            data = await concurrent_map(physical, read, concurrency=limit)

        async def postprocess(pair: tuple[str, Any], _: int) -> Any:
            return await self._postprocess(pair[0], pair[1], raw)

        return await concurrent_map(zip(keys, data), postprocess, concurrency=limit)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value.

        Args:
            key: The logical key.
            value: The value to store.
            ttl: TTL in milliseconds. None uses the default; 0 never expires.

        Returns:
            True once the adapter has stored the value.
        """
        serialized = self._codec.encode(value, ttl)
        await self._store.set(self._key_builder.build(key), serialized, self._codec.resolve_ttl(ttl))
        return True

    async def mset(
        self,
        keys: Sequence[str],
        values: Sequence[Any],
        ttl: int | None = None,
        *,
        concurrency: int | None = None,
    ) -> bool:
        """Store several values given as parallel sequences.

        Uses the adapter's native batch write when it has one, otherwise
        issues single writes through the concurrency-limited mapper.

        Args:
            keys: The logical keys.
            values: Values, parallel to ``keys``.
            ttl: TTL in milliseconds for every value.
            concurrency: Override for the configured concurrency bound.

        Returns:
            True once every value is stored.

        Raises:
            ValueError: If ``keys`` and ``values`` differ in length.
        """
        keys, values = list(keys), list(values)
        if len(keys) != len(values):
            raise ValueError(f"Got {len(keys)} keys but {len(values)} values")

        physical = [self._key_builder.build(key) for key in keys]
        serialized = [self._codec.encode(value, ttl) for value in values]
        store_ttl = self._codec.resolve_ttl(ttl)
        limit = self._concurrency(concurrency)

        if isinstance(self._store, IBatchWritable):
            await self._store.mset(physical, serialized, store_ttl, concurrency=limit)
        else:
            store = self._store

            async def write(pair: tuple[str, Any], _: int) -> Any:
                return await store.set(pair[0], pair[1], store_ttl)

            await concurrent_map(zip(physical, serialized), write, concurrency=limit)
        return True

    async def mset_mapping(
        self,
        mapping: Mapping[str, Any],
        ttl: int | None = None,
        *,
        concurrency: int | None = None,
    ) -> bool:
        """Store every item of a mapping, in its iteration order.

        Equivalent to ``mset(list(mapping), list(mapping.values()), ...)``.
        """
        return await self.mset(
            list(mapping.keys()),
            list(mapping.values()),
            ttl,
            concurrency=concurrency,
        )

    async def delete(self, key: str) -> bool:
        """Delete a value.

        Returns:
            True if the adapter removed a key, False otherwise.
        """
        return await self._store.delete(self._key_builder.build(key))

    async def clear(self) -> None:
        """Clear every value in the adapter's scope and reset statistics."""
        await self._store.clear()
        self._hits = 0
        self._misses = 0
        self._expired = 0

    async def close(self) -> None:
        """Stop observing the adapter and close it if this facade built it."""
        if self._store_subscription is not None:
            self._store_subscription()
            self._store_subscription = None
        if self._owns_store and isinstance(self._store, IClosable):
            await self._store.close()

    async def __aenter__(self) -> "Keyv":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()

    def _concurrency(self, override: int | None) -> int | None:
        return override or self._options.concurrency

    async def _postprocess(self, key: str, data: Any, raw: bool) -> Any:
        """Apply lazy expiration to a value read back from the adapter."""
        entry = self._codec.decode(data)
        state = self._expiration.classify(entry)

        if state is EntryState.MISS:
            self._misses += 1
            return None

        if state is EntryState.EXPIRED:
            _logger.debug("Key %r in namespace %r expired; deleting", key, self.namespace)
            self._expired += 1
            self._misses += 1
            await self.delete(key)
            return None

        self._hits += 1
        return entry if raw else entry.value
