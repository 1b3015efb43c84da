"""keyvy - a uniform async key-value facade over pluggable storage.

Namespaces keys, stores values in an envelope carrying their expiry,
expires entries lazily on read, and runs batch operations with an
optional concurrency bound while keeping results in input order.

Example:
    from keyvy import Keyv

    keyv = Keyv(namespace="sessions", ttl=30_000)

    await keyv.set("abc", {"user": 1})
    await keyv.get("abc")              # {"user": 1}
    await keyv.get("abc", raw=True)    # Entry(value={"user": 1}, expires=...)

    await keyv.mset_mapping({"a": 1, "b": 2}, ttl=0)  # never expire
    await keyv.mget(["a", "b", "missing"])            # [1, 2, None]

Redis (needs the ``redis`` extra):
    keyv = Keyv("redis://localhost:6379/0", namespace="sessions")
    keyv.on_error(lambda err: log.warning("storage error: %s", err))
"""

from keyvy.core.entities import DEFAULT_NAMESPACE, Entry, EntryState, KeyvOptions
from keyvy.core.interfaces import (
    IBatchReadable,
    IBatchWritable,
    IClosable,
    IKeyBuilder,
    IObservable,
    ISerializer,
    IStorageAdapter,
)
from keyvy.core.services import EntryCodec, ErrorObservers, ExpirationPolicy, Keyv
from keyvy.exceptions import (
    AdapterNotFoundError,
    ConfigurationError,
    KeyvError,
    SerializationError,
)
from keyvy.infrastructure import (
    AdapterRegistry,
    InMemoryStorageAdapter,
    JsonSerializer,
    NamespaceKeyBuilder,
    default_registry,
)
from keyvy.utils.concurrency import concurrent_map

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Facade
    "Keyv",
    "KeyvOptions",
    "DEFAULT_NAMESPACE",
    # Entities
    "Entry",
    "EntryState",
    # Core interfaces
    "IStorageAdapter",
    "IBatchReadable",
    "IBatchWritable",
    "IObservable",
    "IClosable",
    "IKeyBuilder",
    "ISerializer",
    # Core services
    "EntryCodec",
    "ExpirationPolicy",
    "ErrorObservers",
    "concurrent_map",
    # Infrastructure implementations
    "InMemoryStorageAdapter",
    "NamespaceKeyBuilder",
    "JsonSerializer",
    "AdapterRegistry",
    "default_registry",
    # Errors
    "KeyvError",
    "ConfigurationError",
    "AdapterNotFoundError",
    "SerializationError",
]
