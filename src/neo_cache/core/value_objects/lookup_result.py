"""Lookup result value objects.

A storage lookup either finds a value (Hit) or does not (Miss). Resolvers
attached to a CacheItem return one of these, never a bare tuple.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Hit:
    """Successful lookup. ``value`` may legitimately be None."""

    value: Any

    @property
    def is_hit(self) -> bool:
        return True


@dataclass(frozen=True)
class Miss:
    """Lookup that found nothing (absent or expired)."""

    @property
    def is_hit(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None


LookupResult = Union[Hit, Miss]

MISS = Miss()


def ensure_lookup_result(result: Any) -> LookupResult:
    """Reject resolver results that are not Hit or Miss.

    Raises:
        TypeError: If ``result`` has the wrong shape
    """
    if not isinstance(result, (Hit, Miss)):
        raise TypeError(
            f"Cache resolver must return Hit or Miss, got {type(result).__name__}"
        )
    return result
