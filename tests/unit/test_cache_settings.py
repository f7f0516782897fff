"""Unit tests for cache settings."""

import json
import pytest
from pathlib import Path
from pydantic import ValidationError

from neo_cache.core.exceptions import CacheConfigurationError
from neo_cache.infrastructure.configuration import CacheSettings, create_cache_settings
from neo_cache.infrastructure.serializers import SerializerType


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test away from real NEO_CACHE_* variables and .env files."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "NEO_CACHE_DIRECTORY",
        "NEO_CACHE_SERIALIZER",
        "NEO_CACHE_TIMEZONE",
        "NEO_CACHE_DIRECTORY_PERMISSIONS",
        "NEO_CACHE_USE_COMPRESSION",
    ):
        monkeypatch.delenv(name, raising=False)


class TestCacheSettingsDefaults:
    """Test default values."""

    def test_defaults(self):
        """Test the documented defaults."""
        settings = create_cache_settings("defaults")

        assert settings.directory == Path("storage/cache")
        assert settings.serializer == SerializerType.JSON
        assert settings.file_extension is None
        assert settings.directory_permissions == 0o777
        assert settings.timezone == "UTC"
        assert settings.flush_on_close is True
        assert settings.use_compression is False

    def test_defaults_ignore_environment(self, monkeypatch):
        """Test the defaults source does not read the environment."""
        monkeypatch.setenv("NEO_CACHE_SERIALIZER", "pickle")

        assert create_cache_settings("defaults").serializer == SerializerType.JSON

    def test_overrides(self):
        """Test overrides are applied on top of defaults."""
        settings = create_cache_settings("defaults", overrides={"serializer": "msgpack"})

        assert settings.serializer == SerializerType.MSGPACK


class TestCacheSettingsEnvironment:
    """Test environment variables."""

    def test_environment(self, monkeypatch, tmp_path):
        """Test NEO_CACHE_ prefixed variables are read."""
        monkeypatch.setenv("NEO_CACHE_DIRECTORY", str(tmp_path / "env_cache"))
        monkeypatch.setenv("NEO_CACHE_SERIALIZER", "pickle")
        monkeypatch.setenv("NEO_CACHE_USE_COMPRESSION", "true")
        monkeypatch.setenv("NEO_CACHE_DIRECTORY_PERMISSIONS", "750")

        settings = create_cache_settings()

        assert settings.directory == tmp_path / "env_cache"
        assert settings.serializer == SerializerType.PICKLE
        assert settings.use_compression is True
        assert settings.directory_permissions == 0o750

    def test_permissions_with_prefix(self):
        """Test '0o' prefixed permission strings."""
        settings = create_cache_settings("defaults", overrides={"directory_permissions": "0o700"})

        assert settings.directory_permissions == 0o700

    def test_extension_dot_stripped(self):
        """Test a leading dot is removed from the extension."""
        settings = create_cache_settings("defaults", overrides={"file_extension": ".cache"})

        assert settings.file_extension == "cache"


class TestCacheSettingsValidation:
    """Test validation failures."""

    def test_invalid_timezone(self):
        """Test unknown timezones are configuration errors."""
        with pytest.raises(CacheConfigurationError, match="Invalid cache configuration"):
            create_cache_settings("defaults", overrides={"timezone": "Nowhere/City"})

    def test_invalid_timezone_model(self):
        """Test the model itself rejects unknown timezones."""
        with pytest.raises(ValidationError):
            CacheSettings(timezone="Nowhere/City")

    def test_unknown_serializer(self):
        """Test unknown serializers are configuration errors."""
        with pytest.raises(CacheConfigurationError) as exc_info:
            create_cache_settings("defaults", overrides={"serializer": "xml"})

        assert exc_info.value.details["errors"]

    def test_empty_extension(self):
        """Test an empty extension is rejected."""
        with pytest.raises(CacheConfigurationError):
            create_cache_settings("defaults", overrides={"file_extension": "."})

    def test_invalid_source(self):
        """Test unknown configuration sources."""
        with pytest.raises(CacheConfigurationError, match="Invalid configuration source"):
            create_cache_settings("database")

    def test_file_source_requires_path(self):
        """Test the file source needs a path."""
        with pytest.raises(CacheConfigurationError, match="config_path"):
            create_cache_settings("file")


class TestCacheSettingsFiles:
    """Test file based configuration."""

    def test_yaml_file(self, tmp_path):
        """Test YAML configuration files."""
        config_file = tmp_path / "cache.yaml"
        config_file.write_text(
            "directory: /tmp/neo_cache\n"
            "serializer: msgpack\n"
            "timezone: Europe/Paris\n"
            "directory_permissions: '750'\n"
        )

        settings = create_cache_settings("file", config_file)

        assert settings.directory == Path("/tmp/neo_cache")
        assert settings.serializer == SerializerType.MSGPACK
        assert settings.timezone == "Europe/Paris"
        assert settings.directory_permissions == 0o750

    def test_json_file_with_overrides(self, tmp_path):
        """Test JSON files and override precedence."""
        config_file = tmp_path / "cache.json"
        config_file.write_text(json.dumps({"serializer": "pickle", "flush_on_close": False}))

        settings = CacheSettings.from_file(config_file, serializer="json")

        assert settings.serializer == SerializerType.JSON
        assert settings.flush_on_close is False

    def test_empty_yaml_file(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        config_file = tmp_path / "empty.yml"
        config_file.write_text("")

        assert CacheSettings.from_file(config_file).serializer == SerializerType.JSON

    def test_missing_file(self, tmp_path):
        """Test missing files are configuration errors."""
        with pytest.raises(CacheConfigurationError, match="not found"):
            CacheSettings.from_file(tmp_path / "absent.yaml")

    def test_unsupported_format(self, tmp_path):
        """Test unsupported file formats."""
        config_file = tmp_path / "cache.ini"
        config_file.write_text("[cache]\n")

        with pytest.raises(CacheConfigurationError, match="Unsupported"):
            CacheSettings.from_file(config_file)

    def test_non_mapping_file(self, tmp_path):
        """Test files must contain a mapping."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- one\n- two\n")

        with pytest.raises(CacheConfigurationError, match="mapping"):
            CacheSettings.from_file(config_file)

    def test_export(self):
        """Test dictionary and YAML export."""
        settings = create_cache_settings("defaults")

        data = settings.to_dict()
        assert data["serializer"] == "json"
        assert data["directory"] == "storage/cache"
        assert "serializer: json" in settings.to_yaml()
        assert "serializer=json" in str(settings)


class TestCacheSettingsPermissionsInFiles:
    """Test directory permissions read from files."""

    @pytest.mark.parametrize("name, content", [
        ("cache.yaml", "directory_permissions: 755\n"),
        ("cache.json", '{"directory_permissions": 755}'),
    ])
    def test_bare_integer_rejected(self, tmp_path, name, content):
        """Test unquoted permission numbers are refused as ambiguous."""
        config_file = tmp_path / name
        config_file.write_text(content)

        with pytest.raises(CacheConfigurationError, match="octal string"):
            CacheSettings.from_file(config_file)

    def test_integer_override_allowed(self, tmp_path):
        """Test Python callers may pass the mode as a number."""
        config_file = tmp_path / "cache.yaml"
        config_file.write_text("serializer: json\n")

        settings = CacheSettings.from_file(config_file, directory_permissions=0o755)

        assert settings.directory_permissions == 0o755

    def test_yaml_export_round_trip(self, tmp_path):
        """Test an exported configuration loads back unchanged."""
        settings = create_cache_settings("defaults", overrides={"directory_permissions": "750"})
        config_file = tmp_path / "exported.yaml"
        config_file.write_text(settings.to_yaml())

        reloaded = CacheSettings.from_file(config_file)

        assert settings.to_dict()["directory_permissions"] == "0o750"
        assert reloaded.directory_permissions == 0o750
        assert reloaded.to_dict() == settings.to_dict()
