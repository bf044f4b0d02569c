"""
Logging setup for gql_automock.

This module provides handler configuration with colored console output,
structured JSON lines and rotating log files.
"""

from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, cleanup_logging, get_logger, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "get_logger",
    "cleanup_logging",
    "StructuredFormatter",
    "ColoredFormatter",
]
