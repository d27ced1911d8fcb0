"""Serializer interface."""

from typing import Any, Protocol


class SerializationError(Exception):
    """Raised when serialization or deserialization fails."""

    pass


class ISerializer(Protocol):
    """Contract for encoding cached responses.

    The stored form must decode back to an equal response, since a hit
    is returned to the client in place of executing the query.
    """

    def serialize(self, value: Any) -> bytes:
        """Serialize a response to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes previously produced by serialize.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
