"""JSON serializer implementation."""

import json
from typing import Any

from fullquerycache.core.interfaces.serializer import SerializationError


class JsonSerializer:
    """JSON serializer for cached responses.

    Responses are plain JSON documents, so no custom encoders are
    registered: anything that does not survive a JSON round trip is
    rejected instead of being cached in a lossy form.
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
            value: The response to serialize.

        Returns:
            The serialized value as bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(value, separators=(",", ":"), allow_nan=False)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Args:
            data: The bytes to deserialize.

        Returns:
            The deserialized response.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            return json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e
