"""Entry entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from keyvy.utils.clock import current_time_millis


class EntryState(Enum):
    """Classification of a single read.

    HIT: A live entry was found.
    MISS: Nothing was stored under the key.
    EXPIRED: An entry was found but its expiry time has passed.
    """

    HIT = "HIT"
    MISS = "MISS"
    EXPIRED = "EXPIRED"


@dataclass(frozen=True)
class Entry:
    """Immutable stored envelope.

    Wraps a value together with its absolute expiry timestamp so the
    expiry survives a round trip through any storage adapter.

    Attributes:
        value: The stored value.
        expires: Expiry as epoch milliseconds, or None for "never expires".
    """

    value: Any
    expires: int | None = None

    def is_expired(self, now: int | None = None) -> bool:
        """Check if the entry has expired.

        Args:
            now: Current epoch milliseconds. Defaults to the wall clock.

        Returns:
            True if the entry carries an expiry that lies in the past.
        """
        if not isinstance(self.expires, (int, float)) or isinstance(self.expires, bool):
            return False
        if now is None:
            now = current_time_millis()
        return now > self.expires

    def to_dict(self) -> dict[str, Any]:
        """Return the serializable envelope."""
        return {"value": self.value, "expires": self.expires}

    @classmethod
    def create(
        cls,
        value: Any,
        ttl: int | None = None,
        now: int | None = None,
    ) -> "Entry":
        """Factory method to create an entry from a relative TTL.

        Args:
            value: The value to store.
            ttl: Time-to-live in milliseconds, or None for no expiry.
            now: Current epoch milliseconds. Defaults to the wall clock.

        Returns:
            A new Entry instance.
        """
        if ttl is None:
            return cls(value=value, expires=None)
        if now is None:
            now = current_time_millis()
        return cls(value=value, expires=now + ttl)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        """Rebuild an entry from its envelope.

        Raises:
            ValueError: If the mapping is not an entry envelope.
        """
        if "value" not in data:
            raise ValueError("Envelope has no 'value' field")
        return cls(value=data["value"], expires=data.get("expires"))
