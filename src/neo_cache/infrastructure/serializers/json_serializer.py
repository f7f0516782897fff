"""JSON cache serializer.

ONLY JSON serialization - implements JSON serialization for cache values
with type preservation and compression support.

Following maximum separation architecture - one file = one purpose.
"""

import json
from typing import Any, Dict, Optional
from datetime import datetime, date
from decimal import Decimal
from uuid import UUID

from .base_serializer import BaseCacheSerializer


class CustomJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for extended type support."""

    def default(self, obj: Any) -> Any:
        """Handle non-standard JSON types."""
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        elif isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        elif isinstance(obj, Decimal):
            return {"__decimal__": str(obj)}
        elif isinstance(obj, UUID):
            return {"__uuid__": str(obj)}
        elif isinstance(obj, set):
            return {"__set__": list(obj)}
        elif isinstance(obj, frozenset):
            return {"__frozenset__": list(obj)}
        elif isinstance(obj, bytes):
            return {"__bytes__": obj.hex()}

        # Raises TypeError for anything else
        return super().default(obj)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode custom JSON objects back to Python types."""
    if "__datetime__" in obj:
        return datetime.fromisoformat(obj["__datetime__"])
    elif "__date__" in obj:
        return date.fromisoformat(obj["__date__"])
    elif "__decimal__" in obj:
        return Decimal(obj["__decimal__"])
    elif "__uuid__" in obj:
        return UUID(obj["__uuid__"])
    elif "__set__" in obj:
        return set(obj["__set__"])
    elif "__frozenset__" in obj:
        return frozenset(obj["__frozenset__"])
    elif "__bytes__" in obj:
        return bytes.fromhex(obj["__bytes__"])

    return obj


class JSONCacheSerializer(BaseCacheSerializer):
    """JSON cache serializer with extended type support and compression.

    Tuples are stored as JSON arrays and come back as lists.
    """

    format_name = "json"
    file_extension = "json"
    content_type = "application/json"

    def __init__(
        self,
        ensure_ascii: bool = False,
        indent: Optional[int] = None,
        sort_keys: bool = False,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024
    ):
        """Initialize JSON serializer.

        Args:
            ensure_ascii: If True, escape non-ASCII characters
            indent: JSON indentation (None for compact)
            sort_keys: Sort dictionary keys
            use_compression: Enable gzip compression
            compression_level: Gzip compression level (1-9)
            compression_threshold: Minimum size for compression
        """
        super().__init__(
            use_compression=use_compression,
            compression_level=compression_level,
            compression_threshold=compression_threshold
        )
        self._ensure_ascii = ensure_ascii
        self._indent = indent
        self._separators = (',', ':') if indent is None else None
        self._sort_keys = sort_keys

    def _encode(self, value: Any) -> bytes:
        return json.dumps(
            value,
            cls=CustomJSONEncoder,
            ensure_ascii=self._ensure_ascii,
            indent=self._indent,
            separators=self._separators,
            sort_keys=self._sort_keys
        ).encode('utf-8')

    def _decode(self, data: bytes) -> Any:
        # json.JSONDecodeError is a ValueError
        return json.loads(data.decode('utf-8'), object_hook=decode_json_object)

    def get_configuration(self) -> Dict[str, Any]:
        config = super().get_configuration()
        config.update({
            "ensure_ascii": self._ensure_ascii,
            "indent": self._indent,
            "sort_keys": self._sort_keys
        })
        return config


# Factory function for dependency injection
def create_json_serializer(
    ensure_ascii: bool = False,
    use_compression: bool = False,
    compression_level: int = 6,
    **options
) -> JSONCacheSerializer:
    """Create JSON cache serializer with configuration."""
    return JSONCacheSerializer(
        ensure_ascii=ensure_ascii,
        use_compression=use_compression,
        compression_level=compression_level,
        **options
    )
