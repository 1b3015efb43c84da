"""Domain services for keyvy."""

from keyvy.core.services.entry_codec import EntryCodec
from keyvy.core.services.expiration import ExpirationPolicy
from keyvy.core.services.keyv import Keyv
from keyvy.core.services.observers import ErrorObservers

__all__ = [
    "Keyv",
    "EntryCodec",
    "ExpirationPolicy",
    "ErrorObservers",
]
