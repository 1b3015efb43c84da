"""Storage adapter registry.

Maps adapter identifiers (``"memory"``, ``"redis"``...) to factories
that build a storage adapter from the facade's options.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from keyvy.core.interfaces.storage_adapter import IStorageAdapter
from keyvy.exceptions import AdapterNotFoundError
from keyvy.infrastructure.backends.memory import InMemoryStorageAdapter

if TYPE_CHECKING:
    from keyvy.core.entities.options import KeyvOptions

_logger = logging.getLogger(__name__)

AdapterFactory = Callable[["KeyvOptions"], IStorageAdapter]

DEFAULT_ADAPTER = "memory"


class AdapterRegistry:
    """Registry of storage adapter factories keyed by identifier."""

    def __init__(self, factories: dict[str, AdapterFactory] | None = None) -> None:
        self._factories: dict[str, AdapterFactory] = dict(factories or {})

    def register(self, name: str, factory: AdapterFactory) -> None:
        """Register (or replace) the factory for an identifier."""
        _logger.debug("Registering storage adapter factory %r", name)
        self._factories[name] = factory

    def names(self) -> list[str]:
        """Return the registered identifiers."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def create(self, options: "KeyvOptions") -> IStorageAdapter:
        """Build the adapter selected by ``options``.

        The identifier is ``options.adapter``, else the scheme of
        ``options.uri``, else ``"memory"``.

        Args:
            options: Merged facade options, handed to the factory.

        Returns:
            A new storage adapter.

        Raises:
            AdapterNotFoundError: If no factory is registered for the identifier.
        """
        name = options.adapter_name or DEFAULT_ADAPTER
        try:
            factory = self._factories[name]
        except KeyError:
            raise AdapterNotFoundError(name, list(self._factories)) from None
        _logger.debug("Creating %r storage adapter for namespace %r", name, options.namespace)
        return factory(options)


def _memory_factory(options: "KeyvOptions") -> IStorageAdapter:
    return InMemoryStorageAdapter(namespace=options.namespace)


def _redis_factory(options: "KeyvOptions") -> IStorageAdapter:
    # Optional dependency, installed with the ``redis`` extra.
    from keyvy.infrastructure.backends.redis import RedisStorageAdapter

    if options.uri:
        return RedisStorageAdapter(url=options.uri, namespace=options.namespace)
    return RedisStorageAdapter(namespace=options.namespace)


def default_registry() -> AdapterRegistry:
    """Create a registry holding the adapters shipped with keyvy."""
    return AdapterRegistry(
        {
            "memory": _memory_factory,
            "redis": _redis_factory,
            "rediss": _redis_factory,
        }
    )
