"""Cache protocols."""

from .storage_adapter import StorageAdapter
from .cache_serializer import CacheSerializer

__all__ = [
    "StorageAdapter",
    "CacheSerializer",
]
