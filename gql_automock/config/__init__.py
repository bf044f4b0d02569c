"""
Configuration management for gql_automock.

This module provides settings models and loading from configuration files
and environment variables.
"""

from .loader import ConfigLoader, load_mock_config
from .models import AutoMockSettings, GenerationConfig, LoggingConfig, LogLevel

__all__ = [
    "AutoMockSettings",
    "LoggingConfig",
    "LogLevel",
    "GenerationConfig",
    "ConfigLoader",
    "load_mock_config",
]
