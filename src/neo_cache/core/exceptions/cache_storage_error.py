"""Cache storage error.

Raised by storage adapters for backend failures (I/O, permissions).
Pool operations translate it into a False return value.
"""

from typing import Optional

from .base import CacheError


class CacheStorageError(CacheError):
    """Storage adapter failure."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.key = key
        self.operation = operation
        self.original_error = original_error

        details = {"key": key, "operation": operation}
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error)
            }

        super().__init__(message, error_code="CACHE_STORAGE_ERROR", details=details)
