"""
Logging manager for gql_automock.

Library modules only create loggers; handlers are installed here, usually
by the command line entry point.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional

from ..config.models import LoggingConfig, LogLevel
from .formatters import ColoredFormatter, StructuredFormatter

PACKAGE_LOGGER = "gql_automock"


class LoggingManager:
    """Configures handlers on the package logger."""

    def __init__(self) -> None:
        """Initialize logging manager."""
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, LogLevel(config.level).value))

        if config.enable_console:
            self._setup_console_handler(config)

        if config.enable_file and config.file_path:
            self._setup_file_handler(config)

        for component, level in config.component_levels.items():
            logging.getLogger(component).setLevel(getattr(logging, LogLevel(level).value))

        self._configured = True
        logging.getLogger(__name__).debug("Logging configured")

    def _formatter(self, config: LoggingConfig, colored: bool) -> logging.Formatter:
        if config.enable_structured:
            return StructuredFormatter()
        if colored:
            return ColoredFormatter(config.format)
        return logging.Formatter(config.format)

    def _setup_console_handler(self, config: LoggingConfig) -> None:
        """Log to stderr so command output on stdout stays clean."""
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(config, colored=True))
        self.add_handler("console", handler)

    def _setup_file_handler(self, config: LoggingConfig) -> None:
        """Setup rotating file handler."""
        log_path = Path(str(config.file_path))
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._formatter(config, colored=False))
        self.add_handler("file", handler)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get logger for specific component.

        Args:
            name: Logger name

        Returns:
            Logger instance
        """
        return logging.getLogger(name)

    def set_level(self, level: LogLevel, component: Optional[str] = None) -> None:
        """
        Set logging level.

        Args:
            level: New logging level
            component: Specific component (None for the package logger)
        """
        logging.getLogger(component or PACKAGE_LOGGER).setLevel(
            getattr(logging, LogLevel(level).value)
        )

    def add_handler(self, name: str, handler: logging.Handler) -> None:
        """Attach a named handler to the package logger."""
        logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
        self._handlers[name] = handler

    def remove_handler(self, name: str) -> None:
        """Detach and close a named handler."""
        handler = self._handlers.pop(name, None)
        if handler is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
            handler.close()

    def cleanup(self) -> None:
        """Remove every handler this manager installed."""
        for name in list(self._handlers):
            self.remove_handler(name)
        self._configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self._configured


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging with configuration.

    Args:
        config: Logging configuration
    """
    _logging_manager.setup_logging(config)


def get_logger(name: str) -> logging.Logger:
    """Get logger for component."""
    return _logging_manager.get_logger(name)


def cleanup_logging() -> None:
    """Cleanup logging system."""
    _logging_manager.cleanup()
