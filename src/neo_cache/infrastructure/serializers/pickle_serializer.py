"""Pickle cache serializer.

ONLY pickle serialization - implements pickle serialization for cache values
with protocol version control and compression support.

Only load pickle files written by a trusted process: unpickling can run
arbitrary code.
"""

import pickle
from typing import Any, Dict

from .base_serializer import BaseCacheSerializer


class PickleCacheSerializer(BaseCacheSerializer):
    """Pickle cache serializer with protocol version control and compression."""

    format_name = "pickle"
    file_extension = "pkl"
    content_type = "application/x-python-pickle"

    encode_errors = (pickle.PicklingError, TypeError, AttributeError, RecursionError)
    decode_errors = (pickle.UnpicklingError, ValueError, AttributeError, ImportError, IndexError)

    def __init__(
        self,
        protocol: int = pickle.HIGHEST_PROTOCOL,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024
    ):
        """Initialize pickle serializer.

        Args:
            protocol: Pickle protocol version (0-5)
            use_compression: Enable gzip compression
            compression_level: Gzip compression level (1-9)
            compression_threshold: Minimum size for compression
        """
        super().__init__(
            use_compression=use_compression,
            compression_level=compression_level,
            compression_threshold=compression_threshold
        )
        # Validate protocol version
        if protocol < 0 or protocol > pickle.HIGHEST_PROTOCOL:
            protocol = pickle.HIGHEST_PROTOCOL

        self._protocol = protocol

    def _encode(self, value: Any) -> bytes:
        return pickle.dumps(value, protocol=self._protocol)

    def _decode(self, data: bytes) -> Any:
        return pickle.loads(data)

    def get_configuration(self) -> Dict[str, Any]:
        config = super().get_configuration()
        config["protocol"] = self._protocol
        return config


# Factory function for dependency injection
def create_pickle_serializer(
    protocol: int = pickle.HIGHEST_PROTOCOL,
    use_compression: bool = False,
    **options
) -> PickleCacheSerializer:
    """Create pickle cache serializer with configuration."""
    return PickleCacheSerializer(protocol=protocol, use_compression=use_compression, **options)
