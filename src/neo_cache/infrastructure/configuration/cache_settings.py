"""Cache configuration management.

ONLY cache configuration functionality - handles cache settings,
defaults, validation, and environment or file based configuration.

Following maximum separation architecture - one file = one purpose.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import Field, ValidationError, field_serializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...core.exceptions.cache_configuration_error import CacheConfigurationError
from ...utils.datetime import resolve_timezone
from ..serializers.serializer_factory import SerializerType


class CacheSettings(BaseSettings):
    """Main cache configuration.

    Every field can be set through a ``NEO_CACHE_`` prefixed environment
    variable, e.g. ``NEO_CACHE_DIRECTORY=/var/cache/app``.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEO_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Storage
    directory: Path = Field(default=Path("storage/cache"))
    file_extension: Optional[str] = Field(default=None)
    directory_permissions: int = Field(default=0o777, ge=0, le=0o7777)

    # Serialization
    serializer: SerializerType = Field(default=SerializerType.JSON)
    use_compression: bool = Field(default=False)
    compression_threshold_bytes: int = Field(default=1024, ge=0)

    # Pool behaviour
    timezone: str = Field(default="UTC")
    flush_on_close: bool = Field(default=True)
    log_cache_operations: bool = Field(default=False)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        resolve_timezone(value)
        return value

    @field_validator("directory_permissions", mode="before")
    @classmethod
    def parse_permissions(cls, value: Any) -> Any:
        """Read permission strings as octal ('755' or '0o755')."""
        if isinstance(value, str):
            value = value.strip()
            return int(value, 0) if value.lower().startswith("0o") else int(value, 8)
        return value

    @field_serializer("directory_permissions", when_used="json")
    def serialize_permissions(self, value: int) -> str:
        return oct(value)

    @field_validator("file_extension")
    @classmethod
    def strip_extension_dot(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.lstrip(".")
        if not value:
            raise ValueError("file_extension cannot be empty")
        return value

    @classmethod
    def from_file(cls, file_path: Union[str, Path], **overrides: Any) -> "CacheSettings":
        """Create configuration from a YAML or JSON file.

        Values from the file take precedence over environment variables;
        ``overrides`` take precedence over both. ``directory_permissions``
        must be quoted ('755' or '0o755'): YAML reads bare 0755 as an octal
        number and 755 as a decimal one.

        Raises:
            CacheConfigurationError: If the file is missing, unsupported or invalid
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise CacheConfigurationError(
                f"Configuration file not found: {file_path}",
                path=str(file_path)
            )

        with open(file_path, 'r', encoding='utf-8') as f:
            if file_path.suffix.lower() in ['.yaml', '.yml']:
                config_data = yaml.safe_load(f) or {}
            elif file_path.suffix.lower() == '.json':
                config_data = json.load(f)
            else:
                raise CacheConfigurationError(
                    f"Unsupported configuration file format: {file_path.suffix}",
                    path=str(file_path)
                )

        if not isinstance(config_data, dict):
            raise CacheConfigurationError(
                f"Configuration file must contain a mapping: {file_path}",
                path=str(file_path)
            )

        permissions = config_data.get("directory_permissions")
        if isinstance(permissions, int) and not isinstance(permissions, bool):
            raise CacheConfigurationError(
                "directory_permissions must be an octal string in configuration files, "
                f"e.g. '755' or '0o755' (got {permissions!r})",
                path=str(file_path)
            )

        config_data.update(overrides)
        return _build_settings(config_data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False)

    def __str__(self) -> str:
        return (
            f"CacheSettings(directory={self.directory}, "
            f"serializer={self.serializer.value}, timezone={self.timezone})"
        )


def _build_settings(values: Dict[str, Any]) -> CacheSettings:
    try:
        return CacheSettings(**values)
    except ValidationError as e:
        raise CacheConfigurationError(
            f"Invalid cache configuration: {e.error_count()} error(s)",
            errors=e.errors(include_url=False)
        ) from e


def create_cache_settings(
    source: str = "environment",
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> CacheSettings:
    """Factory function to create cache configuration.

    Args:
        source: Configuration source ("environment", "file", "defaults")
        config_path: Path to configuration file (if source="file")
        overrides: Optional configuration overrides

    Returns:
        Configured cache settings instance
    """
    overrides = overrides or {}

    if source == "environment":
        return _build_settings(overrides)
    elif source == "file":
        if not config_path:
            raise CacheConfigurationError("config_path required when source='file'")
        return CacheSettings.from_file(config_path, **overrides)
    elif source == "defaults":
        # Ignore environment and .env entirely
        defaults = {
            name: field.get_default(call_default_factory=True)
            for name, field in CacheSettings.model_fields.items()
        }
        defaults.update(overrides)
        return _build_settings(defaults)

    raise CacheConfigurationError(f"Invalid configuration source: {source}")
