"""Serializer implementations."""

from fullquerycache.infrastructure.serializers.json import (
    JsonSerializer,
    SerializationError,
)

__all__ = ["JsonSerializer", "SerializationError"]
