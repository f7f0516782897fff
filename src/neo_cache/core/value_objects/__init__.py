"""Cache value objects."""

from .cache_key import CacheKey
from .lookup_result import Hit, Miss, MISS, LookupResult, ensure_lookup_result

__all__ = [
    "CacheKey",
    "Hit",
    "Miss",
    "MISS",
    "LookupResult",
    "ensure_lookup_result",
]
