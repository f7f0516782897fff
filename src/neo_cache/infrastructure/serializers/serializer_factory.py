"""Serializer selection.

Maps a configured format name to a serializer instance. Unknown names
are rejected when the storage is configured, not when it is first used.
"""

from enum import Enum
from typing import Any, Union

from ...core.exceptions.cache_configuration_error import CacheConfigurationError
from ...core.protocols.cache_serializer import CacheSerializer
from .json_serializer import JSONCacheSerializer
from .pickle_serializer import PickleCacheSerializer
from .msgpack_serializer import MessagePackCacheSerializer


class SerializerType(str, Enum):
    """Supported serializer types."""
    JSON = "json"
    PICKLE = "pickle"
    MSGPACK = "msgpack"


SERIALIZER_CLASSES = {
    SerializerType.JSON: JSONCacheSerializer,
    SerializerType.PICKLE: PickleCacheSerializer,
    SerializerType.MSGPACK: MessagePackCacheSerializer,
}


def create_serializer(
    serializer_type: Union[SerializerType, str] = SerializerType.JSON,
    **options: Any
) -> CacheSerializer:
    """Create a serializer by format name.

    Args:
        serializer_type: 'json', 'pickle' or 'msgpack'
        **options: Serializer constructor options

    Raises:
        CacheConfigurationError: If the format is unknown
    """
    try:
        resolved = SerializerType(
            serializer_type.lower() if isinstance(serializer_type, str) else serializer_type
        )
    except ValueError as e:
        raise CacheConfigurationError(
            f"Unknown cache serializer: {serializer_type!r}",
            supported=[t.value for t in SerializerType]
        ) from e

    return SERIALIZER_CLASSES[resolved](**options)


def ensure_serializer(serializer: Any) -> CacheSerializer:
    """Reject objects that do not implement the CacheSerializer protocol.

    Raises:
        CacheConfigurationError: If ``serializer`` is not a serializer
    """
    if not isinstance(serializer, CacheSerializer):
        raise CacheConfigurationError(
            f"Cache serializer must implement CacheSerializer, got {type(serializer).__name__}"
        )
    return serializer
