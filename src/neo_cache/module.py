"""Cache wiring.

Builds a ready-to-use pool (serializer, filesystem adapter, pool) from
CacheSettings.
"""

import logging
from typing import Optional

from .application.services.cache_item_pool import CacheItemPool
from .infrastructure.adapters.filesystem_storage_adapter import FilesystemStorageAdapter
from .infrastructure.configuration.cache_settings import CacheSettings
from .infrastructure.serializers.serializer_factory import create_serializer

logger = logging.getLogger(__name__)


def create_pool_from_settings(settings: Optional[CacheSettings] = None) -> CacheItemPool:
    """Create a filesystem-backed pool from settings.

    Args:
        settings: Cache settings (read from the environment when omitted)

    Raises:
        CacheConfigurationError: If the serializer or directory is unusable
    """
    settings = settings or CacheSettings()

    serializer = create_serializer(
        settings.serializer,
        use_compression=settings.use_compression,
        compression_threshold=settings.compression_threshold_bytes
    )

    adapter = FilesystemStorageAdapter(
        settings.directory,
        serializer=serializer,
        extension=settings.file_extension,
        directory_permissions=settings.directory_permissions
    )

    logger.debug(f"Cache pool configured: {settings}")

    return CacheItemPool(
        adapter,
        timezone=settings.timezone,
        log_operations=settings.log_cache_operations,
        flush_on_close=settings.flush_on_close
    )
