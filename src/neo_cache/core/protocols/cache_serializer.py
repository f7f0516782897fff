"""Cache serializer protocol.

ONLY serialization contract - encode/decode strategy chosen when a
storage adapter is constructed.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class CacheSerializer(Protocol):
    """Cache serializer protocol."""

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes for cache storage.

        Raises:
            SerializationError: If value cannot be serialized
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes back to a Python object.

        Raises:
            DeserializationError: If data cannot be deserialized
        """
        ...

    def get_format_name(self) -> str:
        """Get serialization format name (e.g., 'json', 'pickle', 'msgpack')."""
        ...

    def get_file_extension(self) -> str:
        """Get the file extension used by filesystem storage."""
        ...

    def get_content_type(self) -> str:
        """Get MIME content type for serialized data."""
        ...
