"""MessagePack cache serializer.

ONLY msgpack serialization - implements MessagePack serialization for cache values
with binary efficiency and compression support.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict
from datetime import datetime, date
from decimal import Decimal
from uuid import UUID

import msgpack

from .base_serializer import BaseCacheSerializer


def default_encoder(obj: Any) -> Any:
    """Default encoder for non-MessagePack types."""
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
    elif isinstance(obj, complex):
        return {"__complex__": [obj.real, obj.imag]}

    raise TypeError(f"Object of type {type(obj).__name__} is not MessagePack serializable")


def decode_msgpack_object(obj: Any) -> Any:
    """Decode custom MessagePack objects back to Python types."""
    if isinstance(obj, dict):
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
        elif "__complex__" in obj:
            real, imag = obj["__complex__"]
            return complex(real, imag)

    return obj


class MessagePackCacheSerializer(BaseCacheSerializer):
    """MessagePack cache serializer with binary efficiency and compression.

    Smaller output than JSON, safer than pickle. Tuples come back as lists.
    """

    format_name = "msgpack"
    file_extension = "msgpack"
    content_type = "application/x-msgpack"

    encode_errors = (TypeError, ValueError, OverflowError)
    decode_errors = (
        ValueError,
        TypeError,
        msgpack.ExtraData,
        msgpack.FormatError,
        msgpack.StackError,
    )

    def __init__(
        self,
        use_single_float: bool = False,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024
    ):
        """Initialize MessagePack serializer.

        Args:
            use_single_float: Pack floats as 32-bit
            use_compression: Enable gzip compression
            compression_level: Gzip compression level (1-9)
            compression_threshold: Minimum size for compression
        """
        super().__init__(
            use_compression=use_compression,
            compression_level=compression_level,
            compression_threshold=compression_threshold
        )
        self._use_single_float = use_single_float

    def _encode(self, value: Any) -> bytes:
        return msgpack.packb(
            value,
            default=default_encoder,
            use_bin_type=True,
            use_single_float=self._use_single_float
        )

    def _decode(self, data: bytes) -> Any:
        return msgpack.unpackb(
            data,
            object_hook=decode_msgpack_object,
            raw=False,
            strict_map_key=False
        )

    def get_configuration(self) -> Dict[str, Any]:
        config = super().get_configuration()
        config["use_single_float"] = self._use_single_float
        return config


# Factory function for dependency injection
def create_msgpack_serializer(
    use_compression: bool = False,
    **options
) -> MessagePackCacheSerializer:
    """Create MessagePack cache serializer with configuration."""
    return MessagePackCacheSerializer(use_compression=use_compression, **options)
