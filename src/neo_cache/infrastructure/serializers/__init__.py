"""Cache infrastructure serializers.

Serialization implementations following maximum separation - one serializer per format.
"""

from .base_serializer import BaseCacheSerializer
from .json_serializer import (
    JSONCacheSerializer,
    create_json_serializer,
)
from .pickle_serializer import (
    PickleCacheSerializer,
    create_pickle_serializer,
)
from .msgpack_serializer import (
    MessagePackCacheSerializer,
    create_msgpack_serializer,
)
from .serializer_factory import (
    SerializerType,
    create_serializer,
    ensure_serializer,
)

__all__ = [
    "BaseCacheSerializer",

    # JSON serialization
    "JSONCacheSerializer",
    "create_json_serializer",

    # Pickle serialization
    "PickleCacheSerializer",
    "create_pickle_serializer",

    # MessagePack serialization
    "MessagePackCacheSerializer",
    "create_msgpack_serializer",

    # Selection
    "SerializerType",
    "create_serializer",
    "ensure_serializer",
]
