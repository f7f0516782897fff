"""Cache domain entities."""

from .cache_item import CacheItem, Resolver

__all__ = [
    "CacheItem",
    "Resolver",
]
