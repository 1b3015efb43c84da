"""Infrastructure layer implementations for keyvy."""

from keyvy.infrastructure.backends import InMemoryStorageAdapter
from keyvy.infrastructure.key_builders import NamespaceKeyBuilder
from keyvy.infrastructure.registry import AdapterRegistry, default_registry
from keyvy.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryStorageAdapter",
    "NamespaceKeyBuilder",
    "JsonSerializer",
    "AdapterRegistry",
    "default_registry",
]
