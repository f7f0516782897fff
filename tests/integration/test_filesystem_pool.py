"""Integration tests for a filesystem-backed pool."""

import json
from datetime import timedelta

import neo_cache
from neo_cache import CacheItem, CacheItemPool, FilesystemStorageAdapter


class TestFilesystemPool:
    """Test the pool and filesystem adapter together."""

    def test_file_written_only_after_commit(self, cache_dir):
        """Test deferred items create their file on commit."""
        pool = CacheItemPool(FilesystemStorageAdapter(cache_dir))
        item = CacheItem("foobar", ["example.com", "abc123"]).expires_after(timedelta(seconds=5))

        pool.save_deferred(item)
        assert not (cache_dir / "foobar.json").exists()

        assert pool.commit() is True
        assert (cache_dir / "foobar.json").exists()

    def test_close_writes_deferred_files(self, cache_dir):
        """Test leaving the pool context flushes deferred items to disk."""
        with CacheItemPool(FilesystemStorageAdapter(cache_dir)) as pool:
            pool.save_deferred(CacheItem("on_close", {"done": True}))

        envelope = json.loads((cache_dir / "on_close.json").read_text())
        assert envelope["value"] == {"done": True}

    def test_values_survive_new_pool(self, cache_dir):
        """Test a second pool on the same directory sees saved items."""
        with CacheItemPool(FilesystemStorageAdapter(cache_dir)) as writer:
            writer.save(CacheItem("shared", [1, 2, 3]))

        with CacheItemPool(FilesystemStorageAdapter(cache_dir)) as reader:
            assert reader.get_item("shared").get() == [1, 2, 3]

    def test_expired_file_removed_on_read(self, cache_dir, clock):
        """Test the file of an expired item disappears when it is read."""
        with CacheItemPool(FilesystemStorageAdapter(cache_dir)) as pool:
            pool.save(CacheItem("foobar", ["example.com", "abc123"]).expires_after(5))
            assert pool.get_item("foobar").get() == ["example.com", "abc123"]

            clock.advance(6)

            assert pool.get_item("foobar").is_hit() is False
            assert not (cache_dir / "foobar.json").exists()

    def test_clear_removes_files(self, cache_dir):
        """Test clear deletes every cache file."""
        with CacheItemPool(FilesystemStorageAdapter(cache_dir)) as pool:
            for key in ("a", "b", "c"):
                pool.save(CacheItem(key, key))

            assert pool.clear() is True

        assert list(cache_dir.glob("*.json")) == []

    def test_public_api(self):
        """Test the top-level package exposes the main entry points."""
        for name in ("CacheItemPool", "CacheItem", "CacheKeyInvalid", "setup_logging", "__version__"):
            assert hasattr(neo_cache, name)
