"""Cache item pool service.

The pool is the repository of all cache items. Callers obtain items from
it, save them immediately or defer them, and the pool delegates
persistence to a StorageAdapter.

Storage failures never escape a pool operation: they are logged and
reported as False. Invalid keys always raise CacheKeyInvalid.
"""

import logging
import math
import threading
from typing import Dict, Iterable, List, Optional

from ...core.entities.cache_item import CacheItem
from ...core.exceptions.cache_key_invalid import CacheKeyInvalid
from ...core.protocols.storage_adapter import StorageAdapter
from ...core.value_objects.cache_key import CacheKey
from ...core.value_objects.lookup_result import MISS, LookupResult
from ...utils import datetime as datetime_utils
from ...utils.datetime import TimezoneLike

logger = logging.getLogger(__name__)


class CacheItemPool:
    """Cache item pool.

    Features:
    - Key validation on every key-accepting operation
    - Lazy, fetch-once items backed by the storage adapter
    - Deferred saves buffered until commit()
    - Best-effort flush of deferred items on close
    - Thread-safe access to the deferred buffer
    """

    def __init__(
        self,
        adapter: StorageAdapter,
        timezone: TimezoneLike = None,
        log_operations: bool = False,
        flush_on_close: bool = True
    ):
        """Initialize cache item pool.

        Args:
            adapter: Storage adapter used for persistence
            timezone: tzinfo or IANA name for expiration math (UTC when omitted)
            log_operations: Log every pool operation at DEBUG level
            flush_on_close: Commit deferred items on close instead of dropping them
        """
        if not isinstance(adapter, StorageAdapter):
            raise TypeError(
                f"adapter must implement StorageAdapter, got {type(adapter).__name__}"
            )

        self._adapter = adapter
        self._timezone = datetime_utils.resolve_timezone(timezone)
        self._log_operations = log_operations
        self._flush_on_close = flush_on_close
        self._deferred: Dict[str, CacheItem] = {}
        self._lock = threading.RLock()
        self._closed = False

    @property
    def adapter(self) -> StorageAdapter:
        return self._adapter

    @property
    def timezone(self):
        return self._timezone

    @property
    def closed(self) -> bool:
        """Whether close() has been called at least once."""
        return self._closed

    @property
    def deferred_count(self) -> int:
        """Number of items waiting for commit()."""
        with self._lock:
            return len(self._deferred)

    # Retrieval

    def get_item(self, key: str) -> CacheItem:
        """Return the item for ``key``; a miss still yields an item.

        Deferred items are returned as independent copies. Other items
        fetch from storage lazily, on first ``is_hit()`` or ``get()``.

        Raises:
            CacheKeyInvalid: If the key is not a legal cache key
        """
        CacheKey.validate(key)

        with self._lock:
            deferred = self._deferred.get(key)
            if deferred is not None:
                self._log("get_item %s (deferred)", key)
                return deferred.clone()

        self._log("get_item %s", key)
        return CacheItem(key, self._make_resolver(key), timezone=self._timezone)

    def get_items(self, keys: Iterable[str] = ()) -> Dict[str, CacheItem]:
        """Return items for every key, in input order.

        Raises:
            CacheKeyInvalid: If any key is not a legal cache key
        """
        keys = _validate_keys(keys)
        return {key: self.get_item(key) for key in keys}

    def has_item(self, key: str) -> bool:
        """Check whether ``key`` currently holds a non-expired value.

        A later get_item(key).get() may observe a different result if the
        storage changes in between; use the returned item's is_hit() when
        the check and the read must agree.
        """
        return self.get_item(key).is_hit()

    def _make_resolver(self, key: str):
        def resolve() -> LookupResult:
            try:
                return self._adapter.fetch(key)
            except CacheKeyInvalid:
                raise
            except Exception as e:
                logger.warning(f"Cache fetch failed for key '{key}': {e}")
                return MISS

        return resolve

    # Removal

    def clear(self) -> bool:
        """Drop deferred items and delete everything from storage."""
        with self._lock:
            self._deferred.clear()
            self._log("clear")
            return self._call_adapter("delete_all", None, self._adapter.delete_all)

    def delete_item(self, key: str) -> bool:
        """Remove ``key`` from the deferred buffer and from storage.

        Raises:
            CacheKeyInvalid: If the key is not a legal cache key
        """
        CacheKey.validate(key)

        with self._lock:
            deleted = True

            if key in self._deferred:
                del self._deferred[key]
                if key in self._deferred:
                    deleted = False

            if not self._call_adapter("delete_one", key, self._adapter.delete_one, key):
                deleted = False

        self._log("delete_item %s -> %s", key, deleted)
        return deleted

    def delete_items(self, keys: Iterable[str]) -> bool:
        """Remove every key, attempting all of them even after a failure.

        Raises:
            CacheKeyInvalid: If any key is not a legal cache key
        """
        keys = _validate_keys(keys)

        deleted = True
        for key in keys:
            if not self.delete_item(key):
                deleted = False

        return deleted

    # Persistence

    def save(self, item: CacheItem) -> bool:
        """Persist an item immediately.

        An item that is no longer a hit (expired, or a lookup that found
        nothing) is stored as already expired, which removes the entry.

        Raises:
            CacheKeyInvalid: If the item key is not a legal cache key
        """
        key = CacheKey.validate(item.get_key())
        item = item.in_timezone(self._timezone)
        ttl = self.compute_ttl(item)

        if not item.is_hit():
            ttl = 0

        self._log("save %s ttl=%s", key, ttl)
        return self._call_adapter("store", key, self._adapter.store, key, item, ttl)

    def save_deferred(self, item: CacheItem) -> bool:
        """Queue an item until commit(). Queuing itself cannot fail.

        The pool keeps its own copy; later changes to ``item`` are not
        seen unless it is saved again.

        Raises:
            CacheKeyInvalid: If the item key is not a legal cache key
        """
        key = CacheKey.validate(item.get_key())

        with self._lock:
            self._deferred[key] = item.clone(timezone=self._timezone)

        if self._closed:
            logger.debug(f"Item '{key}' deferred on a closed pool; it is flushed on the next close")
        self._log("save_deferred %s", key)
        return True

    def commit(self) -> bool:
        """Save every deferred item, then empty the buffer.

        Returns True only if every save succeeded. The buffer is emptied
        even after a partial failure.
        """
        with self._lock:
            pending = list(self._deferred.values())
            saved = True

            try:
                for item in pending:
                    if not self.save(item):
                        saved = False
            finally:
                self._deferred.clear()

        if pending:
            self._log("commit %d item(s) -> %s", len(pending), saved)
        return saved

    def compute_ttl(self, item: CacheItem) -> Optional[int]:
        """Whole seconds until the item expires, None if it never does.

        The result is rounded up and may be zero or negative for items
        that have already expired. Naive expirations of items created
        without a timezone are read in the pool's timezone.
        """
        expiration = item.in_timezone(self._timezone).get_expiration_date()
        if expiration is None:
            return None

        return math.ceil(datetime_utils.seconds_until(expiration))

    # Lifecycle

    def close(self) -> None:
        """Flush deferred items. Failures are logged, never raised.

        The pool stays usable after closing: items deferred later are
        flushed by the next commit(), close() or garbage collection.
        """
        self._closed = True

        with self._lock:
            pending = len(self._deferred)
            if pending and not self._flush_on_close:
                self._deferred.clear()

        if not pending:
            return

        if not self._flush_on_close:
            logger.info(f"Dropped {pending} deferred cache item(s) on close")
            return

        try:
            if not self.commit():
                logger.warning("Some deferred cache items could not be saved on close")
        except Exception as e:
            logger.error(f"Failed to flush deferred cache items on close: {e}")

    def __enter__(self) -> "CacheItemPool":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __del__(self):
        # No caller frame left to report to; partially initialized pools included.
        try:
            self.close()
        except Exception:
            pass

    # Internals

    def _call_adapter(self, operation: str, key: Optional[str], method, *args) -> bool:
        try:
            return bool(method(*args))
        except CacheKeyInvalid:
            raise
        except Exception as e:
            logger.warning(
                f"Cache storage operation '{operation}' failed",
                extra={"cache_key": key, "operation": operation, "error": str(e)}
            )
            return False

    def _log(self, message: str, *args) -> None:
        if self._log_operations:
            logger.debug(message, *args)


def create_cache_item_pool(
    adapter: StorageAdapter,
    timezone: TimezoneLike = None,
    log_operations: bool = False,
    flush_on_close: bool = True
) -> CacheItemPool:
    """Create a cache item pool.

    Args:
        adapter: Storage adapter used for persistence
        timezone: tzinfo or IANA name (UTC when omitted)
        log_operations: Log every pool operation at DEBUG level
        flush_on_close: Commit deferred items on close

    Returns:
        Configured cache item pool
    """
    return CacheItemPool(
        adapter,
        timezone=timezone,
        log_operations=log_operations,
        flush_on_close=flush_on_close
    )


def _validate_keys(keys: Iterable[str]) -> List[str]:
    """Validate a batch of keys before any of them is used.

    Raises:
        CacheKeyInvalid: If ``keys`` is a bare string or any key is invalid
    """
    if isinstance(keys, (str, bytes)):
        raise CacheKeyInvalid.single_key_for_batch(keys)

    keys = list(keys)
    for key in keys:
        CacheKey.validate(key)
    return keys
