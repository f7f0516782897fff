"""Cache application services."""

from .cache_item_pool import CacheItemPool, create_cache_item_pool

__all__ = [
    "CacheItemPool",
    "create_cache_item_pool",
]
