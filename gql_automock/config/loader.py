"""
Configuration loader for gql_automock.

This module loads settings from configuration files and environment
variables, and reads mock configuration files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from ..mock.config import MockConfig
from .models import AutoMockSettings


def _read_data_file(path: Path) -> Dict[str, Any]:
    """Parse a YAML or JSON file into a dict."""
    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise ConfigError(f"Unsupported config file format: {path.suffix}", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping", path=str(path))
    return data


def load_mock_config(path: Union[str, Path]) -> MockConfig:
    """
    Load a MockConfig from a YAML or JSON file.

    Args:
        path: Path to the file

    Returns:
        Parsed MockConfig

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Mock config file not found: {config_path}", path=str(config_path))

    data = _read_data_file(config_path)
    try:
        return MockConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid mock config {config_path}: {e}", path=str(config_path)) from e


class ConfigLoader:
    """Settings loader with support for files and environment variables."""

    def __init__(self) -> None:
        """Initialize configuration loader."""
        self.config_paths = [
            Path("gql_automock.yaml"),
            Path("gql_automock.yml"),
            Path("gql_automock.json"),
            Path("config/gql_automock.yaml"),
            Path("config/gql_automock.yml"),
            Path("config/gql_automock.json"),
            Path.home() / ".gql_automock" / "config.yaml",
            Path.home() / ".gql_automock" / "config.yml",
            Path.home() / ".gql_automock" / "config.json",
        ]

        # Environment variable prefix
        self.env_prefix = "GQL_AUTOMOCK_"

    def load_settings(self, config_file: Optional[Union[str, Path]] = None) -> AutoMockSettings:
        """
        Load settings from all available sources.

        Environment variables override file values.

        Args:
            config_file: Specific settings file to load

        Returns:
            AutoMockSettings instance with merged configuration

        Raises:
            ConfigError: If a file cannot be parsed or values are invalid
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_from_file(config_file)
        if file_config:
            config_data.update(file_config)

        env_config = self._load_from_environment()
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        try:
            return AutoMockSettings(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e}") from e

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigError(f"Settings file not found: {config_path}", path=str(config_path))
            return _read_data_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return _read_data_file(config_path)

        return None

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        env_mappings = {
            # Logging
            f"{self.env_prefix}LOG_LEVEL": ("logging", "level"),
            f"{self.env_prefix}LOG_FILE": ("logging", "file_path"),
            f"{self.env_prefix}LOG_FORMAT": ("logging", "format"),
            f"{self.env_prefix}STRUCTURED_LOGS": ("logging", "enable_structured"),
            # Generation
            f"{self.env_prefix}SEED": ("generation", "seed"),
            f"{self.env_prefix}LOCALE": ("generation", "locale"),
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                converted_value = self._convert_env_value(value)

                current = config
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = converted_value

        if config.get("logging", {}).get("file_path"):
            config["logging"]["enable_file"] = True

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to appropriate type."""
        lower = value.lower()
        if lower in ("true", "yes", "on"):
            return True
        if lower in ("false", "no", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            return value

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def save_settings(self, settings: AutoMockSettings, config_file: Union[str, Path]) -> None:
        """Save settings to a YAML or JSON file."""
        config_path = Path(config_file)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_data = settings.model_dump(mode="json")

        suffix = config_path.suffix.lower()
        with open(config_path, "w", encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                yaml.safe_dump(config_data, f, default_flow_style=False, indent=2)
            elif suffix == ".json":
                json.dump(config_data, f, indent=2)
            else:
                raise ConfigError(
                    f"Unsupported config file format: {config_path.suffix}",
                    path=str(config_path),
                )
