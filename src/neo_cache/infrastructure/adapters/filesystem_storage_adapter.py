"""Filesystem storage adapter.

ONLY filesystem persistence - one file per cache key inside a single
directory, holding the absolute expiration and the value encoded by a
pluggable serializer.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from ...core.entities.cache_item import CacheItem
from ...core.exceptions.cache_configuration_error import CacheConfigurationError
from ...core.exceptions.cache_storage_error import CacheStorageError
from ...core.exceptions.deserialization_error import DeserializationError
from ...core.exceptions.serialization_error import SerializationError
from ...core.protocols.cache_serializer import CacheSerializer
from ...core.value_objects.cache_key import CacheKey
from ...core.value_objects.lookup_result import MISS, Hit, LookupResult
from ...utils import datetime as datetime_utils
from ..serializers.json_serializer import JSONCacheSerializer
from ..serializers.serializer_factory import ensure_serializer

logger = logging.getLogger(__name__)


class FilesystemStorageAdapter:
    """Filesystem storage adapter.

    Each entry lives in ``<directory>/<key>.<extension>`` and contains the
    envelope ``{"expires_at": <unix timestamp or None>, "value": <value>}``.
    Writes go through a temporary file and an atomic rename so readers
    never observe a partially written entry.
    """

    DEFAULT_DIRECTORY_PERMISSIONS = 0o777

    def __init__(
        self,
        directory: Union[str, Path],
        serializer: Optional[CacheSerializer] = None,
        extension: Optional[str] = None,
        directory_permissions: int = DEFAULT_DIRECTORY_PERMISSIONS
    ):
        """Initialize filesystem storage adapter.

        Args:
            directory: Directory used as storage engine, created if missing
            serializer: Value codec (JSON when omitted)
            extension: File extension override (serializer's default otherwise)
            directory_permissions: Mode for directories created by the adapter

        Raises:
            CacheConfigurationError: If the serializer is invalid or the
                directory cannot be created or written to
        """
        self._serializer = (
            ensure_serializer(serializer) if serializer is not None else JSONCacheSerializer()
        )
        self._extension = (extension or self._serializer.get_file_extension()).lstrip(".")
        if not self._extension:
            raise CacheConfigurationError("Cache file extension cannot be empty")

        self._directory_permissions = directory_permissions
        self._path = self._prepare_directory(Path(directory))

    def _prepare_directory(self, path: Path) -> Path:
        try:
            path.mkdir(mode=self._directory_permissions, parents=True, exist_ok=True)
        except OSError as e:
            raise CacheConfigurationError(
                f"Cache directory could not be created: {path}",
                path=str(path),
                error=str(e)
            ) from e

        if not path.is_dir() or not os.access(path, os.W_OK):
            raise CacheConfigurationError(
                f"The cache directory is not writable. Check permissions: {path}",
                path=str(path)
            )

        return path

    @property
    def path(self) -> Path:
        """Directory holding the cache files."""
        return self._path

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def serializer(self) -> CacheSerializer:
        return self._serializer

    def get_file_path(self, key: str) -> Path:
        """Map a key to its file.

        Raises:
            CacheKeyInvalid: If the key is not a legal cache key
        """
        CacheKey.validate(key)
        return self._path / f"{key}.{self._extension}"

    def fetch(self, key: str) -> LookupResult:
        """Read an entry, removing it if it has expired."""
        file_path = self.get_file_path(key)

        try:
            data = file_path.read_bytes()
        except FileNotFoundError:
            return MISS
        except OSError as e:
            logger.warning(f"Failed to read cache file {file_path}: {e}")
            return MISS

        envelope = self._decode_envelope(file_path, data)
        if envelope is None:
            return MISS

        expires_at = envelope["expires_at"]
        if expires_at is not None and datetime_utils.utc_now().timestamp() >= expires_at:
            self.delete_one(key)
            return MISS

        return Hit(envelope["value"])

    def _decode_envelope(self, file_path: Path, data: bytes) -> Optional[dict]:
        try:
            envelope = self._serializer.deserialize(data)
        except DeserializationError as e:
            logger.warning(f"Discarding unreadable cache file {file_path}: {e}")
            return None

        if (
            not isinstance(envelope, dict)
            or "value" not in envelope
            or not isinstance(envelope.get("expires_at"), (int, float, type(None)))
        ):
            logger.warning(f"Discarding malformed cache file {file_path}")
            return None

        return envelope

    def store(self, key: str, item: CacheItem, ttl_seconds: Optional[int]) -> bool:
        """Write an entry; a non-positive TTL removes it instead."""
        file_path = self.get_file_path(key)

        if ttl_seconds is not None and ttl_seconds <= 0:
            # Already expired: nothing to keep
            return self.delete_one(key)

        expires_at = datetime_utils.expiry_timestamp(item.get_expiration_date(), ttl_seconds)

        try:
            payload = self._serializer.serialize({"expires_at": expires_at, "value": item.get()})
        except SerializationError as e:
            logger.warning(f"Cache value for key '{key}' could not be serialized: {e}")
            return False

        try:
            self._write_atomic(file_path, payload)
        except CacheStorageError as e:
            logger.warning(e.message, extra={"details": e.details})
            return False

        return True

    def _write_atomic(self, file_path: Path, payload: bytes) -> None:
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=self._path,
                prefix=f".{file_path.stem}.",
                suffix=".tmp",
                delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, file_path)
        except OSError as e:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug(f"Could not remove temporary cache file {tmp_name}")
            raise CacheStorageError(
                f"Failed to write cache file {file_path}",
                key=file_path.stem,
                operation="store",
                original_error=e
            ) from e

    def delete_one(self, key: str) -> bool:
        """Remove one entry; an absent entry counts as removed."""
        file_path = self.get_file_path(key)

        try:
            file_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to delete cache file {file_path}: {e}")
            return False

        return True

    def delete_all(self) -> bool:
        """Remove every cache file with this adapter's extension."""
        deleted = True

        for target in self._path.glob(f"*.{self._extension}"):
            if not target.is_file():
                continue
            try:
                target.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Failed to delete cache file {target}: {e}")
                deleted = False

        return deleted

    def exists(self, key: str) -> bool:
        return self.fetch(key).is_hit

    def __repr__(self) -> str:
        return (
            f"FilesystemStorageAdapter(path={str(self._path)!r}, "
            f"serializer={self._serializer.get_format_name()!r})"
        )


def create_filesystem_storage_adapter(
    directory: Union[str, Path],
    serializer: Optional[CacheSerializer] = None,
    **options: Any
) -> FilesystemStorageAdapter:
    """Create filesystem storage adapter with configuration."""
    return FilesystemStorageAdapter(directory, serializer=serializer, **options)
