"""Serializer implementations."""

from keyvy.infrastructure.serializers.json import JsonSerializer, SerializationError

__all__ = ["JsonSerializer", "SerializationError"]
