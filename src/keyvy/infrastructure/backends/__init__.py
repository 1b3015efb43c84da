"""Storage adapter implementations.

The Redis adapter lives in ``keyvy.infrastructure.backends.redis`` and
needs the ``redis`` extra; it is not imported here.
"""

from keyvy.infrastructure.backends.memory import InMemoryStorageAdapter

__all__ = ["InMemoryStorageAdapter"]
