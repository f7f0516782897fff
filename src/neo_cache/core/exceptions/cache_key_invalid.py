"""Cache key invalid exception.

ONLY key validation errors - exception raised when a cache key
fails validation. Always a programmer error, never swallowed.
"""

from typing import Any, Optional

from .base import CacheError


class CacheKeyInvalid(CacheError, ValueError):
    """Cache key validation error.

    Raised when a cache key fails validation rules such as:
    - Non-string key
    - Empty key
    - Characters reserved for future extensions: {}()/\\@:
    - Characters outside [A-Za-z0-9_]
    """

    def __init__(
        self,
        key: Any,
        reason: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        """Initialize cache key validation error.

        Args:
            key: The invalid cache key
            reason: Human-readable reason for validation failure
            error_code: Optional machine-readable error code
            details: Optional additional error details
        """
        self.key = key
        self.reason = reason

        super().__init__(
            f"Invalid cache key {key!r}: {reason}",
            error_code=error_code or "CACHE_KEY_INVALID",
            details=details,
        )

    @classmethod
    def not_a_string(cls, key: Any) -> "CacheKeyInvalid":
        """Create exception for a key that is not a string."""
        return cls(
            key=key,
            reason=f"Cache key must be a string, {type(key).__name__} given",
            error_code="CACHE_KEY_NOT_STRING",
            details={"key_type": type(key).__name__}
        )

    @classmethod
    def empty_key(cls) -> "CacheKeyInvalid":
        """Create exception for empty cache key."""
        return cls(
            key="",
            reason="Cache key must be at least one character",
            error_code="CACHE_KEY_EMPTY"
        )

    @classmethod
    def reserved_characters(cls, key: str, found: str) -> "CacheKeyInvalid":
        """Create exception for key using characters reserved for future extension."""
        return cls(
            key=key,
            reason=(
                "Cache key contains one or more characters reserved for "
                f"future extension: {found}"
            ),
            error_code="CACHE_KEY_RESERVED_CHARS",
            details={"reserved_characters": found}
        )

    @classmethod
    def invalid_characters(cls, key: str, invalid_chars: str) -> "CacheKeyInvalid":
        """Create exception for key with characters outside the allowed set."""
        return cls(
            key=key,
            reason=(
                f"Cache key contains invalid characters: {invalid_chars}. "
                "Valid keys must match [A-Za-z0-9_]"
            ),
            error_code="CACHE_KEY_INVALID_CHARS",
            details={"invalid_characters": invalid_chars}
        )

    @classmethod
    def single_key_for_batch(cls, keys: Any) -> "CacheKeyInvalid":
        """Create exception for a bare string passed where a list of keys is expected."""
        return cls(
            key=keys,
            reason=(
                f"Expected an iterable of cache keys, got a single {type(keys).__name__}; "
                "wrap it in a list"
            ),
            error_code="CACHE_KEYS_NOT_ITERABLE",
            details={"keys_type": type(keys).__name__}
        )
