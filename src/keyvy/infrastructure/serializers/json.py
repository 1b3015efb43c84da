"""JSON serializer implementation."""

import base64
import json
from datetime import date, datetime
from typing import Any

from keyvy.exceptions import SerializationError

_BYTES_TAG = "__bytes__"
_DATETIME_TAG = "__datetime__"
_DATE_TAG = "__date__"
_ESCAPE_TAG = "__escaped__"
_TAGS = frozenset({_BYTES_TAG, _DATETIME_TAG, _DATE_TAG, _ESCAPE_TAG})


class JsonSerializer:
    """JSON serializer for stored envelopes.

    Handles serialization of Python objects to JSON bytes and back.
    Values JSON cannot carry natively (bytes, datetime, date) are written
    as single-key tagged objects and restored on the way back, so binary
    payloads survive a round trip. A user dict that happens to look like a
    tag is escaped as a list of pairs under ``__escaped__`` so it is never
    mistaken for one.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value as bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(_escape(value), default=self._default_encoder)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes | str) -> Any:
        """Deserialize bytes or str to value.

        Args:
            data: The serialized form.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding) if isinstance(data, bytes) else data
            return json.loads(json_str, object_hook=self._object_hook)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, ValueError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Args:
            obj: The object to encode.

        Returns:
            A JSON-serializable representation of the object.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if isinstance(obj, (bytes, bytearray, memoryview)):
            return {_BYTES_TAG: base64.b64encode(bytes(obj)).decode("ascii")}
        if isinstance(obj, datetime):
            return {_DATETIME_TAG: obj.isoformat()}
        if isinstance(obj, date):
            return {_DATE_TAG: obj.isoformat()}
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    @staticmethod
    def _object_hook(obj: dict[str, Any]) -> Any:
        if len(obj) != 1:
            return obj
        if _ESCAPE_TAG in obj:
            return dict(obj[_ESCAPE_TAG])
        if _BYTES_TAG in obj:
            return base64.b64decode(obj[_BYTES_TAG])
        if _DATETIME_TAG in obj:
            return datetime.fromisoformat(obj[_DATETIME_TAG])
        if _DATE_TAG in obj:
            return date.fromisoformat(obj[_DATE_TAG])
        return obj


def _escape(value: Any) -> Any:
    """Wrap single-key dicts whose key is a tag so decoding restores them as dicts."""
    if isinstance(value, dict):
        escaped = {key: _escape(item) for key, item in value.items()}
        if len(escaped) == 1:
            key = next(iter(escaped))
            if key in _TAGS:
                return {_ESCAPE_TAG: [[key, escaped[key]]]}
        return escaped
    if isinstance(value, (list, tuple)):
        return [_escape(item) for item in value]
    return value
