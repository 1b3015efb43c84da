"""Core domain layer for keyvy."""

from keyvy.core.entities import Entry, EntryState, KeyvOptions
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

__all__ = [
    # Entities
    "Entry",
    "EntryState",
    "KeyvOptions",
    # Interfaces
    "IStorageAdapter",
    "IBatchReadable",
    "IBatchWritable",
    "IObservable",
    "IClosable",
    "IKeyBuilder",
    "ISerializer",
    # Services
    "Keyv",
    "EntryCodec",
    "ExpirationPolicy",
    "ErrorObservers",
]
