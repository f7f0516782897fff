"""Cache configuration."""

from .cache_settings import CacheSettings, create_cache_settings

__all__ = [
    "CacheSettings",
    "create_cache_settings",
]
