"""
Logging configuration for the underlying catalog.

Provides a consistent log line format across modules with:
- JSON output for production
- Human-readable output for development
"""

import json
import logging
import sys
from datetime import UTC, datetime

from finance_underlying.config import get_settings

HUMAN_FORMAT = "%(timestamp)s | %(levelname)-8s | %(name)s | %(message)s"


class CatalogFormatter(logging.Formatter):
    """
    Formatter that stamps each record with an ISO-8601 UTC timestamp.

    In JSON mode each record becomes one JSON object per line.
    """

    def __init__(self, fmt: str | None = None, json_output: bool = False):
        super().__init__(fmt)
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        record.timestamp = datetime.now(UTC).isoformat()
        if not self.json_output:
            return super().format(record)

        entry = {
            "timestamp": record.timestamp,
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(level: str | None = None, json_output: bool | None = None) -> logging.Logger:
    """
    Configure logging for the package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the log_level setting.
        json_output: If True, emit JSON lines. Defaults to the log_json setting.

    Returns:
        Configured package logger
    """
    settings = get_settings()
    if level is None:
        level = settings.log_level
    if json_output is None:
        json_output = settings.log_json

    logger = logging.getLogger("finance_underlying")
    logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(CatalogFormatter(HUMAN_FORMAT, json_output=json_output))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
