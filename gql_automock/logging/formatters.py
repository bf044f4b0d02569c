"""
Logging formatters for gql_automock.

StructuredFormatter writes one JSON object per record. Fields passed through
``extra=`` (operation_kind, operation_name, return_type, type_name...) are
collected under ``context`` so log consumers can filter mock runs by
operation or type. ColoredFormatter highlights the level name on terminals.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came from ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields attached to a record through ``extra=``."""
    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}


class StructuredFormatter(logging.Formatter):
    """JSON lines formatter with the record's extra fields under ``context``."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }

        context = record_context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: Optional[bool] = None,
    ) -> None:
        """
        Initialize colored formatter.

        Args:
            fmt: Log format string
            datefmt: Date format string
            use_colors: Whether to use colors (auto-detect from stderr if None)
        """
        super().__init__(fmt, datefmt)
        if use_colors is None:
            use_colors = sys.stderr.isatty() and sys.platform != "win32"
        self.use_colors = use_colors

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno) if self.use_colors else None
        if color is None:
            return super().formatMessage(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = levelname
