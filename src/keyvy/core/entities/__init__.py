"""Domain entities for keyvy."""

from keyvy.core.entities.entry import Entry, EntryState
from keyvy.core.entities.options import DEFAULT_NAMESPACE, KeyvOptions

__all__ = [
    "Entry",
    "EntryState",
    "KeyvOptions",
    "DEFAULT_NAMESPACE",
]
