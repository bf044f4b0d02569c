"""
Configuration models for gql_automock.

This module defines the application settings: logging and generation
defaults. Per-type mock overrides live in ``gql_automock.mock.config``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.WARNING, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    max_file_size: int = Field(
        default=10 * 1024 * 1024, description="Max log file size in bytes"
    )
    backup_count: int = Field(default=5, description="Number of backup log files")
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_file: bool = Field(default=False, description="Enable file logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )

    # Component-specific log levels
    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict, description="Per-component log levels"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


class GenerationConfig(BaseModel):
    """Random source settings for mock generation."""

    seed: Optional[int] = Field(
        default=None, description="Seed for reproducible output (None for random)"
    )
    locale: str = Field(default="en_US", description="Faker locale")

    @field_validator("locale")
    @classmethod
    def locale_not_blank(cls, v: str) -> str:
        """Reject empty locales."""
        if not v.strip():
            raise ValueError("locale must not be empty")
        return v.strip()


class AutoMockSettings(BaseModel):
    """Global settings container."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    # Custom settings
    custom: Dict[str, Any] = Field(
        default_factory=dict, description="Custom configuration values"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )
