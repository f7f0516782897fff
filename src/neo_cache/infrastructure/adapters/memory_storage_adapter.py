"""Memory storage adapter.

ONLY in-memory implementation - keeps entries in a dict for development,
testing, and single-process deployments.

Following maximum separation architecture - one file = one purpose.
"""

import copy
import threading
from typing import Any, Dict, Optional, Tuple

from ...core.entities.cache_item import CacheItem
from ...core.value_objects.cache_key import CacheKey
from ...core.value_objects.lookup_result import MISS, Hit, LookupResult
from ...utils import datetime as datetime_utils


class MemoryStorageAdapter:
    """Thread-safe in-memory storage adapter.

    Values are deep-copied on the way in and out so stored entries cannot
    be mutated through references held by callers.
    """

    def __init__(self):
        self._entries: Dict[str, Tuple[Optional[float], Any]] = {}
        self._lock = threading.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
            "expired_cleanups": 0,
        }

    def fetch(self, key: str) -> LookupResult:
        CacheKey.validate(key)

        with self._lock:
            entry = self._entries.get(key)

            if entry is None:
                self._stats["misses"] += 1
                return MISS

            expires_at, value = entry
            if expires_at is not None and datetime_utils.utc_now().timestamp() >= expires_at:
                del self._entries[key]
                self._stats["expired_cleanups"] += 1
                self._stats["misses"] += 1
                return MISS

            self._stats["hits"] += 1
            return Hit(copy.deepcopy(value))

    def store(self, key: str, item: CacheItem, ttl_seconds: Optional[int]) -> bool:
        CacheKey.validate(key)

        if ttl_seconds is not None and ttl_seconds <= 0:
            return self.delete_one(key)

        expires_at = datetime_utils.expiry_timestamp(item.get_expiration_date(), ttl_seconds)
        value = copy.deepcopy(item.get())

        with self._lock:
            self._entries[key] = (expires_at, value)
            self._stats["sets"] += 1

        return True

    def delete_one(self, key: str) -> bool:
        CacheKey.validate(key)

        with self._lock:
            if self._entries.pop(key, None) is not None:
                self._stats["deletes"] += 1

        return True

    def delete_all(self) -> bool:
        with self._lock:
            self._stats["deletes"] += len(self._entries)
            self._entries.clear()

        return True

    def exists(self, key: str) -> bool:
        return self.fetch(key).is_hit

    def get_size(self) -> int:
        """Get number of stored entries, expired ones included."""
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """Get storage statistics."""
        with self._lock:
            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0.0

            return {
                **self._stats,
                "total_keys": len(self._entries),
                "hit_rate_percent": hit_rate,
                "total_requests": total_requests,
            }
