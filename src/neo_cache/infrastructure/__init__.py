"""Cache infrastructure layer.

Storage adapters, serializers and configuration.
"""

from .adapters import *
from .serializers import *
from .configuration import *

__all__ = [
    # Adapters
    "FilesystemStorageAdapter",
    "create_filesystem_storage_adapter",
    "MemoryStorageAdapter",

    # Serializers
    "BaseCacheSerializer",
    "JSONCacheSerializer",
    "create_json_serializer",
    "PickleCacheSerializer",
    "create_pickle_serializer",
    "MessagePackCacheSerializer",
    "create_msgpack_serializer",
    "SerializerType",
    "create_serializer",
    "ensure_serializer",

    # Configuration
    "CacheSettings",
    "create_cache_settings",
]
