"""Cache application layer."""

from .services import *

__all__ = [
    "CacheItemPool",
    "create_cache_item_pool",
]
