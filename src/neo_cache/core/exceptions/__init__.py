"""Cache domain exceptions.

One exception per file following maximum separation architecture.
"""

from .base import CacheError
from .cache_key_invalid import CacheKeyInvalid
from .cache_storage_error import CacheStorageError
from .cache_configuration_error import CacheConfigurationError
from .serialization_error import SerializationError
from .deserialization_error import DeserializationError

__all__ = [
    "CacheError",
    "CacheKeyInvalid",
    "CacheStorageError",
    "CacheConfigurationError",
    "SerializationError",
    "DeserializationError",
]
