"""Storage adapter protocol.

ONLY persistence contract - the single boundary between the pool and a
durable key/blob store.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.cache_item import CacheItem
from ..value_objects.lookup_result import LookupResult


@runtime_checkable
class StorageAdapter(Protocol):
    """Storage adapter protocol.

    Implementations may raise CacheStorageError (or OSError) on backend
    failures; the pool turns those into False results.
    """

    def fetch(self, key: str) -> LookupResult:
        """Fetch the value stored under ``key``.

        Returns Miss() when the key is absent or expired, never raises for
        "not found".
        """
        ...

    def store(self, key: str, item: CacheItem, ttl_seconds: Optional[int]) -> bool:
        """Persist ``item.get()`` under ``key``.

        ``ttl_seconds`` None means no expiration; a value <= 0 means the
        entry is already expired and a later fetch must report Miss().
        For positive values the entry expires at ``item.get_expiration_date()``
        when the item has one, otherwise ``ttl_seconds`` from now.
        """
        ...

    def delete_one(self, key: str) -> bool:
        """Delete one entry. Deleting an absent key succeeds."""
        ...

    def delete_all(self) -> bool:
        """Delete every entry in this adapter's scope."""
        ...

    def exists(self, key: str) -> bool:
        """Check if a non-expired entry is stored under ``key``."""
        ...
