"""Core interfaces (Protocol classes) for keyvy."""

from keyvy.core.interfaces.key_builder import IKeyBuilder
from keyvy.core.interfaces.serializer import ISerializer
from keyvy.core.interfaces.storage_adapter import (
    ErrorHandler,
    IBatchReadable,
    IBatchWritable,
    IClosable,
    IObservable,
    IStorageAdapter,
    Unsubscribe,
)

__all__ = [
    "IStorageAdapter",
    "IBatchReadable",
    "IBatchWritable",
    "IObservable",
    "IClosable",
    "IKeyBuilder",
    "ISerializer",
    "ErrorHandler",
    "Unsubscribe",
]
