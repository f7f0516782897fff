"""Storage adapters."""

from .filesystem_storage_adapter import (
    FilesystemStorageAdapter,
    create_filesystem_storage_adapter,
)
from .memory_storage_adapter import MemoryStorageAdapter

__all__ = [
    "FilesystemStorageAdapter",
    "create_filesystem_storage_adapter",
    "MemoryStorageAdapter",
]
