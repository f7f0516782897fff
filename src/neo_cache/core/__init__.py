"""Cache core domain layer.

Clean core containing only entities, value objects, exceptions and
shared contracts. No storage or serialization details.
"""

from .entities import *
from .value_objects import *
from .exceptions import *
from .protocols import *

__all__ = [
    # Entities
    "CacheItem",
    "Resolver",

    # Value Objects
    "CacheKey",
    "Hit",
    "Miss",
    "MISS",
    "LookupResult",
    "ensure_lookup_result",

    # Exceptions
    "CacheError",
    "CacheKeyInvalid",
    "CacheStorageError",
    "CacheConfigurationError",
    "SerializationError",
    "DeserializationError",

    # Protocols
    "StorageAdapter",
    "CacheSerializer",
]
