"""Cache configuration error."""

from .base import CacheError


class CacheConfigurationError(CacheError):
    """Raised at construction time for invalid settings, serializers or directories."""

    def __init__(self, message: str, **details):
        super().__init__(message, error_code="CACHE_CONFIGURATION_ERROR", details=details)
