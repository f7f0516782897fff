"""Cache key value object.

ONLY key validation - immutable cache key restricted to the portable
key alphabet shared by every storage adapter.

Following maximum separation architecture - one file = one purpose.
"""

import re
from dataclasses import dataclass
from typing import Any

from ..exceptions.cache_key_invalid import CacheKeyInvalid


@dataclass(frozen=True)
class CacheKey:
    """Cache key value object.

    A key is a string of at least one character made of A-Z, a-z, 0-9
    and underscore. The characters {}()/\\@: are reserved for future
    extensions and rejected with a dedicated error.
    """

    value: str

    RESERVED_CHARACTERS = "{}()/\\@:"
    RESERVED_PATTERN = re.compile(r"[{}()/\\@:]")
    VALID_PATTERN = re.compile(r"[A-Za-z0-9_]+")
    INVALID_CHARACTER_PATTERN = re.compile(r"[^A-Za-z0-9_]")

    def __post_init__(self):
        """Validate cache key on creation."""
        self.validate(self.value)

    @classmethod
    def validate(cls, key: Any) -> str:
        """Validate a raw key and return it unchanged.

        Raises:
            CacheKeyInvalid: If the key is not a legal cache key
        """
        if not isinstance(key, str):
            raise CacheKeyInvalid.not_a_string(key)

        if not key:
            raise CacheKeyInvalid.empty_key()

        reserved = cls.RESERVED_PATTERN.findall(key)
        if reserved:
            raise CacheKeyInvalid.reserved_characters(key, _unique(reserved))

        if not cls.VALID_PATTERN.fullmatch(key):
            invalid = cls.INVALID_CHARACTER_PATTERN.findall(key)
            raise CacheKeyInvalid.invalid_characters(key, _unique(invalid))

        return key

    @classmethod
    def is_valid(cls, key: Any) -> bool:
        """Check a raw key without raising."""
        try:
            cls.validate(key)
        except CacheKeyInvalid:
            return False
        return True

    def __str__(self) -> str:
        """String representation."""
        return self.value


def _unique(chars: list) -> str:
    return "".join(dict.fromkeys(chars))
