"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for serializing/deserializing stored envelopes.

    Serializers convert the entry envelope to a textual form the
    storage adapter can hold, and back.
    """

    def serialize(self, value: Any) -> bytes | str:
        """Serialize value.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value as bytes or str.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes | str) -> Any:
        """Deserialize data to value.

        Args:
            data: The serialized form.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
