"""Deserialization error exception.

ONLY deserialization errors - exception for cached bytes that cannot be
turned back into Python objects.
"""

from typing import Any, Dict, Optional

from .base import CacheError


class DeserializationError(CacheError):
    """Cache deserialization error."""

    def __init__(
        self,
        message: str,
        data: Optional[bytes] = None,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize deserialization error.

        Args:
            message: Error description
            data: Serialized data that failed to deserialize
            serializer_type: Type of serializer that failed
            original_error: Original underlying exception
        """
        self.data = data
        self.serializer_type = serializer_type
        self.original_error = original_error

        details: Dict[str, Any] = {"serializer_type": serializer_type}
        if data is not None:
            details["data_size"] = len(data)
            details["data_preview"] = data[:50].hex()
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error)
            }

        super().__init__(
            message,
            error_code="CACHE_DESERIALIZATION_ERROR",
            details=details
        )
