"""Entry codec: wraps values and their expiry into a serialized envelope."""

from collections.abc import Callable, Mapping
from typing import Any

from keyvy.core.entities.entry import Entry
from keyvy.core.interfaces.serializer import ISerializer
from keyvy.exceptions import SerializationError
from keyvy.utils.clock import current_time_millis


class EntryCodec:
    """Builds and parses stored envelopes.

    The full envelope (value and expiry) is always serialized, never the
    bare value, so the expiry survives a round trip through any adapter.
    """

    def __init__(
        self,
        serializer: ISerializer,
        default_ttl: int | None = None,
        clock: Callable[[], int] = current_time_millis,
    ) -> None:
        """Initialize the codec.

        Args:
            serializer: Codec used for the envelope.
            default_ttl: TTL in milliseconds applied when a write gives none.
            clock: Source of epoch milliseconds.
        """
        self._serializer = serializer
        self._default_ttl = default_ttl
        self._clock = clock

    @property
    def default_ttl(self) -> int | None:
        """Return the default TTL in milliseconds."""
        return self._default_ttl

    def resolve_ttl(self, ttl: int | None = None) -> int | None:
        """Resolve the TTL that applies to a write.

        An explicit ``ttl`` wins, otherwise the default applies. An
        explicit ``0`` means "never expires" even when a default is set.

        Returns:
            TTL in milliseconds, or None for no expiry.
        """
        if ttl is None:
            ttl = self._default_ttl
        if ttl == 0:
            return None
        return ttl

    def encode(self, value: Any, ttl: int | None = None) -> bytes | str:
        """Wrap ``value`` in an envelope and serialize it.

        Args:
            value: The value to store.
            ttl: TTL override in milliseconds.

        Returns:
            The serialized envelope.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        entry = Entry.create(value, self.resolve_ttl(ttl), now=self._clock())
        return self._serializer.serialize(entry.to_dict())

    def decode(self, data: Any) -> Entry | None:
        """Parse a stored form back into an entry.

        Textual forms (str or bytes) go through the deserializer; an
        already structured form (an Entry or a mapping) is used as is.

        Args:
            data: The raw value returned by the adapter.

        Returns:
            The entry, or None if nothing was stored.

        Raises:
            SerializationError: If the stored form is not a valid envelope.
        """
        if data is None or isinstance(data, Entry):
            return data

        if isinstance(data, (str, bytes, bytearray)):
            data = self._serializer.deserialize(
                bytes(data) if isinstance(data, bytearray) else data
            )
            if data is None:
                return None

        if isinstance(data, Mapping):
            try:
                return Entry.from_dict(data)
            except ValueError as e:
                raise SerializationError(f"Invalid stored envelope: {e}") from e

        raise SerializationError(f"Unrecognized stored form: {type(data).__name__}")
