"""Unit tests for cache key validation."""

import pytest

from neo_cache.core.exceptions import CacheKeyInvalid, CacheError
from neo_cache.core.value_objects import CacheKey

from ..conftest import VALID_KEYS, INVALID_KEYS


class TestCacheKey:
    """Test CacheKey value object."""

    @pytest.mark.parametrize("key", VALID_KEYS)
    def test_valid_keys(self, key):
        """Test keys made of letters, digits and underscores are accepted."""
        assert CacheKey.validate(key) == key
        assert CacheKey(key).value == key
        assert str(CacheKey(key)) == key
        assert CacheKey.is_valid(key) is True

    @pytest.mark.parametrize("key", INVALID_KEYS)
    def test_invalid_keys(self, key):
        """Test every illegal key is rejected."""
        with pytest.raises(CacheKeyInvalid):
            CacheKey.validate(key)
        assert CacheKey.is_valid(key) is False

    @pytest.mark.parametrize("key", [None, 42, b"bytes", ["list"]])
    def test_non_string_keys(self, key):
        """Test non-string keys are rejected."""
        with pytest.raises(CacheKeyInvalid) as exc_info:
            CacheKey.validate(key)
        assert exc_info.value.error_code == "CACHE_KEY_NOT_STRING"

    def test_empty_key_error(self):
        """Test empty key has a dedicated error."""
        with pytest.raises(CacheKeyInvalid, match="at least one character") as exc_info:
            CacheKey("")
        assert exc_info.value.error_code == "CACHE_KEY_EMPTY"

    def test_reserved_characters_reported(self):
        """Test reserved characters are reported before other invalid ones."""
        with pytest.raises(CacheKeyInvalid, match="reserved") as exc_info:
            CacheKey.validate("a:b@c-d:")
        assert exc_info.value.error_code == "CACHE_KEY_RESERVED_CHARS"
        assert exc_info.value.details["reserved_characters"] == ":@"

    def test_invalid_characters_reported(self):
        """Test characters outside the alphabet are listed."""
        with pytest.raises(CacheKeyInvalid) as exc_info:
            CacheKey.validate("a-b.c")
        assert exc_info.value.details["invalid_characters"] == "-."

    def test_exception_hierarchy(self):
        """Test invalid key errors are both CacheError and ValueError."""
        with pytest.raises(ValueError):
            CacheKey.validate("")
        with pytest.raises(CacheError):
            CacheKey.validate("")

    def test_trailing_newline_rejected(self):
        """Test a trailing newline does not slip past the pattern."""
        with pytest.raises(CacheKeyInvalid):
            CacheKey.validate("key\n")

    def test_immutable(self):
        """Test CacheKey cannot be modified."""
        key = CacheKey("immutable")
        with pytest.raises(AttributeError):
            key.value = "changed"
