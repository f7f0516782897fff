"""Filesystem cache demo.

Stores an item for five seconds, then reads it back. Run it twice within
five seconds to see a hit on the second run.
"""

import uuid
from datetime import timedelta
from pathlib import Path

from neo_cache import (
    CacheItem,
    CacheItemPool,
    FilesystemStorageAdapter,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


def main() -> None:
    setup_logging(log_verbosity="VERBOSE")

    directory = Path(__file__).parent / "storage" / "cache"

    with CacheItemPool(FilesystemStorageAdapter(directory)) as pool:
        existing = pool.get_item("foobar")
        logger.info(f"Before save: {existing!r} hit={existing.is_hit()}")

        item = CacheItem("foobar", ["example.com", uuid.uuid4().hex])
        item.expires_after(timedelta(seconds=5))
        pool.save(item)

        fetched = pool.get_item("foobar")
        print(fetched.get())


if __name__ == "__main__":
    main()
