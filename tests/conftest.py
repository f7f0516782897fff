"""Pytest configuration and fixtures for neo-cache tests."""

import pytest
from datetime import datetime, timedelta, timezone

from neo_cache.application.services.cache_item_pool import CacheItemPool
from neo_cache.infrastructure.adapters.filesystem_storage_adapter import FilesystemStorageAdapter
from neo_cache.infrastructure.adapters.memory_storage_adapter import MemoryStorageAdapter
from neo_cache.utils import datetime as datetime_utils


class FrozenClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


@pytest.fixture
def clock(monkeypatch):
    """Freeze library time at 2024-01-01 12:00 UTC."""
    frozen = FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
    monkeypatch.setattr(datetime_utils, "utc_now", frozen)
    return frozen


@pytest.fixture
def cache_dir(tmp_path):
    """Empty directory for filesystem cache files."""
    return tmp_path / "cache"


@pytest.fixture
def filesystem_adapter(cache_dir):
    """Filesystem adapter with the default JSON serializer."""
    return FilesystemStorageAdapter(cache_dir)


@pytest.fixture
def memory_adapter():
    """In-memory storage adapter."""
    return MemoryStorageAdapter()


@pytest.fixture
def memory_pool(memory_adapter):
    """Pool backed by memory storage."""
    pool = CacheItemPool(memory_adapter)
    yield pool
    pool.close()


@pytest.fixture
def filesystem_pool(filesystem_adapter):
    """Pool backed by filesystem storage."""
    pool = CacheItemPool(filesystem_adapter)
    yield pool
    pool.close()


@pytest.fixture(params=["memory", "filesystem"])
def pool(request, memory_adapter, filesystem_adapter):
    """Pool for every bundled storage adapter."""
    adapter = memory_adapter if request.param == "memory" else filesystem_adapter
    pool = CacheItemPool(adapter)
    yield pool
    pool.close()


VALID_KEYS = ["a", "foobar", "user_42", "A_b_C_123", "_", "0"]

INVALID_KEYS = [
    "",
    "with space",
    "dash-key",
    "dot.key",
    "unicode_é",
    "brace{",
    "brace}",
    "paren(",
    "paren)",
    "slash/",
    "back\\slash",
    "at@",
    "colon:",
]
