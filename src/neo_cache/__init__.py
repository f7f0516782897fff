"""Neo-Cache - generic cache pool with deferred writes and pluggable storage.

Items are obtained from a CacheItemPool, which validates keys, buffers
deferred saves and delegates persistence to a StorageAdapter (filesystem
or in-memory).
"""

from .__version__ import __version__

from .core import (
    CacheItem,
    CacheKey,
    Hit,
    Miss,
    MISS,
    LookupResult,
    CacheError,
    CacheKeyInvalid,
    CacheStorageError,
    CacheConfigurationError,
    SerializationError,
    DeserializationError,
    StorageAdapter,
    CacheSerializer,
)
from .application import CacheItemPool, create_cache_item_pool
from .infrastructure import (
    FilesystemStorageAdapter,
    MemoryStorageAdapter,
    JSONCacheSerializer,
    PickleCacheSerializer,
    MessagePackCacheSerializer,
    SerializerType,
    create_serializer,
    CacheSettings,
    create_cache_settings,
)
from .module import create_pool_from_settings
from .config import setup_logging, get_logger

__all__ = [
    "__version__",

    # Core
    "CacheItem",
    "CacheKey",
    "Hit",
    "Miss",
    "MISS",
    "LookupResult",
    "StorageAdapter",
    "CacheSerializer",

    # Exceptions
    "CacheError",
    "CacheKeyInvalid",
    "CacheStorageError",
    "CacheConfigurationError",
    "SerializationError",
    "DeserializationError",

    # Pool
    "CacheItemPool",
    "create_cache_item_pool",
    "create_pool_from_settings",

    # Storage and serialization
    "FilesystemStorageAdapter",
    "MemoryStorageAdapter",
    "JSONCacheSerializer",
    "PickleCacheSerializer",
    "MessagePackCacheSerializer",
    "SerializerType",
    "create_serializer",

    # Configuration
    "CacheSettings",
    "create_cache_settings",
    "setup_logging",
    "get_logger",
]
