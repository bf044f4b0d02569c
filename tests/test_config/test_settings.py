"""
Tests for settings models and the configuration loader.
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from gql_automock import ConfigError
from gql_automock.config import (
    AutoMockSettings,
    ConfigLoader,
    GenerationConfig,
    LoggingConfig,
    LogLevel,
    load_mock_config,
)


class TestSettingsModels:
    """Test settings model validation and defaults."""

    def test_defaults(self):
        settings = AutoMockSettings()

        assert settings.logging.level == LogLevel.WARNING
        assert settings.logging.enable_console is True
        assert settings.generation.seed is None
        assert settings.generation.locale == "en_US"

    def test_level_case_insensitive(self):
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_blank_locale_rejected(self):
        with pytest.raises(ValidationError):
            GenerationConfig(locale="  ")

    def test_extra_keys_forbidden(self):
        with pytest.raises(ValidationError):
            AutoMockSettings(unknown_section={})

    def test_validate_assignment(self):
        settings = AutoMockSettings()
        with pytest.raises(ValidationError):
            settings.generation = "not a config"


class TestConfigLoader:
    """Test loading settings from files and the environment."""

    def test_no_sources(self, isolated_cwd):
        assert ConfigLoader().load_settings() == AutoMockSettings()

    def test_discovers_yaml_in_cwd(self, isolated_cwd):
        (isolated_cwd / "gql_automock.yaml").write_text(
            yaml.safe_dump({"generation": {"seed": 42, "locale": "de_DE"}})
        )

        settings = ConfigLoader().load_settings()
        assert settings.generation.seed == 42
        assert settings.generation.locale == "de_DE"

    def test_explicit_json_file(self, isolated_cwd):
        path = isolated_cwd / "settings.json"
        path.write_text(json.dumps({"logging": {"level": "INFO"}}))

        settings = ConfigLoader().load_settings(path)
        assert settings.logging.level == LogLevel.INFO

    def test_missing_explicit_file(self, isolated_cwd):
        with pytest.raises(ConfigError):
            ConfigLoader().load_settings(isolated_cwd / "nope.yaml")

    def test_unsupported_format(self, isolated_cwd):
        path = isolated_cwd / "settings.toml"
        path.write_text("seed = 1")

        with pytest.raises(ConfigError, match="Unsupported config file format"):
            ConfigLoader().load_settings(path)

    def test_malformed_file(self, isolated_cwd):
        path = isolated_cwd / "settings.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Failed to parse"):
            ConfigLoader().load_settings(path)

    def test_invalid_values(self, isolated_cwd):
        path = isolated_cwd / "settings.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "LOUD"}}))

        with pytest.raises(ConfigError, match="Invalid settings"):
            ConfigLoader().load_settings(path)

    def test_environment_overrides_file(self, isolated_cwd, monkeypatch):
        path = isolated_cwd / "settings.yaml"
        path.write_text(yaml.safe_dump({"generation": {"seed": 1, "locale": "fr_FR"}}))
        monkeypatch.setenv("GQL_AUTOMOCK_SEED", "7")
        monkeypatch.setenv("GQL_AUTOMOCK_LOG_LEVEL", "debug")
        monkeypatch.setenv("GQL_AUTOMOCK_STRUCTURED_LOGS", "true")

        settings = ConfigLoader().load_settings(path)
        assert settings.generation.seed == 7
        assert settings.generation.locale == "fr_FR"
        assert settings.logging.level == LogLevel.DEBUG
        assert settings.logging.enable_structured is True

    def test_log_file_env_enables_file_logging(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("GQL_AUTOMOCK_LOG_FILE", str(isolated_cwd / "automock.log"))

        settings = ConfigLoader().load_settings()
        assert settings.logging.enable_file is True
        assert settings.logging.file_path == isolated_cwd / "automock.log"

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_save_and_reload(self, isolated_cwd, suffix):
        loader = ConfigLoader()
        settings = AutoMockSettings(generation=GenerationConfig(seed=3))
        path = isolated_cwd / "out" / f"settings{suffix}"

        loader.save_settings(settings, path)

        assert loader.load_settings(path) == settings

    def test_save_unsupported_format(self, isolated_cwd):
        with pytest.raises(ConfigError):
            ConfigLoader().save_settings(AutoMockSettings(), isolated_cwd / "settings.ini")


class TestLoadMockConfig:
    """Test reading mock configuration files."""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "mocks.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "operations": {"getWidgets": {"enabled": False}},
                    "types": {"Widget": {"fields": {"name": {"value": "Sprocket"}}}},
                }
            )
        )

        config = load_mock_config(path)
        assert not config.is_operation_enabled("getWidgets")
        assert config.field_override("Widget", "name").resolve_value() == "Sprocket"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "mocks.yml"
        path.write_text("")

        assert load_mock_config(path).types == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "mocks.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_mock_config(path)

    def test_invalid_override(self, tmp_path):
        path = tmp_path / "mocks.json"
        path.write_text(json.dumps({"types": {"Widget": {"fields": {"tags": {"arrayMin": -2}}}}}))

        with pytest.raises(ConfigError, match="Invalid mock config"):
            load_mock_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_mock_config(tmp_path / "missing.yaml")

        assert exc_info.value.path.endswith("missing.yaml")
