"""Cache item domain entity.

ONLY cache item entity - a single key/value pair within a pool, with a
lazily resolved value and an optional absolute expiration.

Following maximum separation architecture - one file = one purpose.
"""

import copy
import logging
import threading
from datetime import datetime, timedelta, tzinfo
from typing import Any, Callable, Optional, Tuple, Union

from ..value_objects.lookup_result import LookupResult, ensure_lookup_result
from ...utils import datetime as datetime_utils


Resolver = Callable[[], LookupResult]

logger = logging.getLogger(__name__)


class CacheItem:
    """Cache item domain entity.

    An item is created either with an immediate value or with a resolver,
    a zero-argument callable returning ``Hit(value)`` or ``Miss()``. The
    resolver is invoked at most once, on the first ``is_hit()`` or
    ``get()`` call, and its result is memoized.

    Any callable passed as ``value`` is treated as a resolver. To cache a
    callable itself, use ``CacheItem(key).set(fn)``.
    """

    def __init__(
        self,
        key: str,
        value: Union[Any, Resolver] = None,
        timezone: Optional[tzinfo] = None
    ):
        """Initialize cache item.

        Args:
            key: Cache item identifier (validated by the pool, not here)
            value: Immediate value, or a resolver fetching it from storage
            timezone: Timezone used for "now" and for naive datetimes. When
                omitted, UTC is used until a pool adopts the item into its own
                timezone (see clone())
        """
        self._key = key
        self._value: Any = None
        self._has_value = False
        self._resolver: Optional[Resolver] = None
        self._expiration: Optional[datetime] = None
        self._timezone = datetime_utils.resolve_timezone(timezone)
        self._timezone_explicit = timezone is not None
        self._lock = threading.Lock()

        if callable(value):
            self.set_callback(value)
        else:
            self.set(value)

    # Key

    def get_key(self) -> str:
        """Get the key of this item."""
        return self._key

    def set_key(self, key: str) -> None:
        """Reassign the key. Validation is the pool's responsibility."""
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    # Value

    def set(self, value: Any) -> "CacheItem":
        """Set the value immediately, discarding any pending resolver."""
        with self._lock:
            self._value = value
            self._has_value = True
            self._resolver = None
        return self

    def set_callback(self, resolver: Resolver) -> "CacheItem":
        """Attach a resolver, returning the item to the unresolved state."""
        if not callable(resolver):
            raise TypeError("Cache item resolver must be callable")

        with self._lock:
            self._resolver = resolver
        return self

    def get(self) -> Any:
        """Get the value, or None when the lookup was not a hit.

        None is also a legitimate cached value; use ``is_hit()`` to tell
        "None was found" from "nothing was found".
        """
        hit, value = self._evaluate()
        return value if hit else None

    def is_hit(self) -> bool:
        """Check whether the item holds a non-expired value."""
        hit, _ = self._evaluate()
        return hit

    def is_resolved(self) -> bool:
        """Check whether no resolver is pending."""
        return self._resolver is None

    def _evaluate(self) -> Tuple[bool, Any]:
        with self._lock:
            if self._resolver is not None:
                resolver, self._resolver = self._resolver, None
                result = ensure_lookup_result(resolver())
                self._has_value = result.is_hit
                self._value = result.value

            if not self._has_value:
                return False, None

            expiration = self.get_expiration_date()
            if expiration is not None:
                return expiration > datetime_utils.now(self._timezone), self._value

            return True, self._value

    # Expiration

    def expires_at(self, expiration: Optional[datetime]) -> "CacheItem":
        """Set the absolute expiration; None removes it.

        Naive datetimes are interpreted in the item's timezone, or in the
        pool's timezone when the item was created without one.
        """
        if expiration is None:
            self._expiration = None
        elif isinstance(expiration, datetime):
            # Kept naive; read in the item timezone by get_expiration_date()
            self._expiration = expiration
        else:
            raise TypeError(
                f"Expiration must be a datetime or None, got {type(expiration).__name__}"
            )
        return self

    def expires_after(self, time: Union[timedelta, int, float, None]) -> "CacheItem":
        """Set the expiration relative to now; integers are seconds, None removes it."""
        if time is None:
            self._expiration = None
        elif isinstance(time, timedelta):
            self._expiration = datetime_utils.now(self._timezone) + time
        elif isinstance(time, (int, float)) and not isinstance(time, bool):
            self._expiration = datetime_utils.now(self._timezone) + timedelta(seconds=time)
        else:
            raise TypeError(
                f"Expiration period must be a timedelta, a number of seconds or None, "
                f"got {type(time).__name__}"
            )
        return self

    def get_expiration_date(self) -> Optional[datetime]:
        """Get the absolute expiration, None when the item never expires.

        Naive expirations are returned in the item's timezone.
        """
        if self._expiration is None:
            return None
        return datetime_utils.to_aware(self._expiration, self._timezone)

    def has_naive_expiration(self) -> bool:
        return self._expiration is not None and self._expiration.tzinfo is None

    def get_timezone(self) -> tzinfo:
        return self._timezone

    # Copying

    def clone(self, timezone: Optional[tzinfo] = None) -> "CacheItem":
        """Create an independent copy of this item.

        The value is deep-copied; a pending resolver is shared but has not
        been invoked in either copy yet. Values that cannot be deep-copied
        (locks, open files) are shared with the copy.

        Args:
            timezone: Timezone adopted by the copy when this item was created
                without one
        """
        with self._lock:
            duplicate = self.__class__.__new__(self.__class__)
            duplicate._key = self._key
            duplicate._value = _copy_value(self._key, self._value)
            duplicate._has_value = self._has_value
            duplicate._resolver = self._resolver
            duplicate._expiration = self._expiration
            duplicate._timezone = self._timezone
            duplicate._timezone_explicit = self._timezone_explicit
            duplicate._lock = threading.Lock()

        if timezone is not None and not duplicate._timezone_explicit:
            duplicate._timezone = timezone
            duplicate._timezone_explicit = True
        return duplicate

    def in_timezone(self, timezone: tzinfo) -> "CacheItem":
        """Return an item whose naive expiration is read in ``timezone``.

        Returns the item itself unless it has a naive expiration and was
        created without a timezone.
        """
        if self._timezone_explicit or not self.has_naive_expiration():
            return self
        return self.clone(timezone=timezone)

    def __copy__(self) -> "CacheItem":
        return self.clone()

    def __deepcopy__(self, memo) -> "CacheItem":
        return self.clone()

    def __repr__(self) -> str:
        if self._resolver is not None:
            state = "unresolved"
        elif self._has_value:
            state = "hit"
        else:
            state = "miss"

        expiration = self._expiration.isoformat() if self._expiration else None
        return f"CacheItem(key={self._key!r}, state={state}, expires_at={expiration})"


def _copy_value(key: str, value: Any) -> Any:
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error, RecursionError) as e:
        logger.debug(f"Cache value for key '{key}' cannot be deep-copied, sharing it: {e}")
        return value
