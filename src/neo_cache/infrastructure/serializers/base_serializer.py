"""Shared serializer behaviour.

Compression framing and statistics common to every format. Subclasses
only implement _encode/_decode.
"""

import gzip
import time
from dataclasses import dataclass
from typing import Any, Dict

from ...core.exceptions.serialization_error import SerializationError
from ...core.exceptions.deserialization_error import DeserializationError


COMPRESSION_PREFIX = b'GZIP:'


@dataclass
class SerializerStats:
    """Serializer performance statistics."""

    serialization_count: int = 0
    deserialization_count: int = 0
    total_serialization_time: float = 0.0
    total_deserialization_time: float = 0.0
    total_bytes_serialized: int = 0
    total_bytes_deserialized: int = 0
    error_count: int = 0


class BaseCacheSerializer:
    """Base class for cache serializers with optional gzip compression."""

    format_name = ""
    file_extension = ""
    content_type = "application/octet-stream"

    # Exceptions from the underlying codec that mean "bad input"
    encode_errors: tuple = (TypeError, ValueError, OverflowError)
    decode_errors: tuple = (ValueError, UnicodeDecodeError)

    def __init__(
        self,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024  # Compress if > 1KB
    ):
        """Initialize serializer.

        Args:
            use_compression: Enable gzip compression
            compression_level: Gzip compression level (1-9)
            compression_threshold: Minimum size for compression
        """
        self._use_compression = use_compression
        self._compression_level = max(1, min(9, compression_level))
        self._compression_threshold = max(0, compression_threshold)
        self._stats = SerializerStats()

    def _encode(self, value: Any) -> bytes:
        raise NotImplementedError

    def _decode(self, data: bytes) -> Any:
        raise NotImplementedError

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes."""
        start_time = time.time()

        try:
            raw = self._encode(value)
        except self.encode_errors as e:
            self._stats.error_count += 1
            raise SerializationError(
                f"{self.format_name} serialization failed: {e}",
                value=value,
                serializer_type=self.format_name,
                original_error=e
            ) from e

        result = self._compress(raw)

        self._stats.serialization_count += 1
        self._stats.total_serialization_time += time.time() - start_time
        self._stats.total_bytes_serialized += len(result)
        return result

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes back to a Python object."""
        start_time = time.time()

        try:
            result = self._decode(self._decompress(data))
        except (gzip.BadGzipFile, EOFError, *self.decode_errors) as e:
            self._stats.error_count += 1
            raise DeserializationError(
                f"{self.format_name} deserialization failed: {e}",
                data=data,
                serializer_type=self.format_name,
                original_error=e
            ) from e

        self._stats.deserialization_count += 1
        self._stats.total_deserialization_time += time.time() - start_time
        self._stats.total_bytes_deserialized += len(data)
        return result

    def _compress(self, raw: bytes) -> bytes:
        if not self._use_compression or len(raw) < self._compression_threshold:
            return raw

        compressed = COMPRESSION_PREFIX + gzip.compress(raw, compresslevel=self._compression_level)
        # Only use compression if it actually reduces size
        return compressed if len(compressed) < len(raw) else raw

    def _decompress(self, data: bytes) -> bytes:
        if data.startswith(COMPRESSION_PREFIX):
            return gzip.decompress(data[len(COMPRESSION_PREFIX):])
        return data

    def get_format_name(self) -> str:
        return self.format_name

    def get_file_extension(self) -> str:
        return self.file_extension

    def get_content_type(self) -> str:
        return self.content_type

    def supports_compression(self) -> bool:
        return True

    def get_configuration(self) -> Dict[str, Any]:
        """Get current configuration."""
        return {
            "use_compression": self._use_compression,
            "compression_level": self._compression_level,
            "compression_threshold": self._compression_threshold
        }

    def get_performance_stats(self) -> Dict[str, Any]:
        """Get performance statistics."""
        stats = dict(self._stats.__dict__)

        if self._stats.serialization_count > 0:
            stats["average_serialization_time"] = (
                self._stats.total_serialization_time / self._stats.serialization_count
            )

        if self._stats.deserialization_count > 0:
            stats["average_deserialization_time"] = (
                self._stats.total_deserialization_time / self._stats.deserialization_count
            )

        return stats

    def reset_performance_stats(self) -> None:
        self._stats = SerializerStats()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(compression={self._use_compression})"
