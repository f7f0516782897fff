"""Serialization error exception.

ONLY serialization errors - exception for cache value serialization failures
with error context and recovery suggestions.
"""

from typing import Any, Optional, Dict

from .base import CacheError


class SerializationError(CacheError):
    """Cache serialization error.

    Raised when a cache value cannot be serialized to bytes.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize serialization error.

        Args:
            message: Error description
            value: Value that failed to serialize
            serializer_type: Type of serializer that failed
            original_error: Original underlying exception
        """
        self.value = value
        self.serializer_type = serializer_type
        self.original_error = original_error

        super().__init__(
            message,
            error_code="CACHE_SERIALIZATION_ERROR",
            details=self._build_details()
        )

    def _build_details(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {"serializer_type": self.serializer_type}

        if self.original_error:
            details["original_error"] = {
                "type": type(self.original_error).__name__,
                "message": str(self.original_error)
            }

        if self.value is not None:
            details["value_type"] = type(self.value).__name__
            details["value_repr"] = repr(self.value)[:100]  # Truncate for safety

        return details

    def get_recovery_suggestions(self) -> list[str]:
        """Get recovery suggestions based on error context."""
        suggestions = []

        if self.serializer_type == "json" and self.original_error:
            if "not JSON serializable" in str(self.original_error):
                suggestions.extend([
                    "Ensure all objects are JSON-serializable",
                    "Use pickle serializer for complex Python objects",
                ])

        if self.serializer_type == "pickle" and self.original_error:
            if "pickle" in str(self.original_error):
                suggestions.append(
                    "Ensure objects don't contain unpicklable elements (lambdas, local classes)"
                )

        if not suggestions:
            suggestions.append("Check that the value is serializable with the chosen format")

        return suggestions
