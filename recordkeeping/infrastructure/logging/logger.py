# -*- coding: utf-8 -*-
"""
Logging configuration module.

This module provides configured loggers for the record-keeping demos. Output
is either a plain single-line text format or a structured JSON format,
selected by ``LOG_FORMAT`` in the settings.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from recordkeeping.core.config import settings

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """
    Formatter that renders each record as a single JSON object.

    Includes the fields needed to trace a message back to its call site.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format

        Returns:
            Formatted log message as a JSON string
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via ``extra={"extra": {...}}``
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            for key, value in record.extra.items():
                if key not in log_data:
                    log_data[key] = value

        return json.dumps(log_data, default=str)


def build_formatter(log_format: Optional[str] = None) -> logging.Formatter:
    """Return the formatter matching ``log_format`` (defaults to settings)."""
    if (log_format or settings.LOG_FORMAT) == "json":
        return StructuredFormatter()
    return logging.Formatter(TEXT_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: The name for the logger, typically __name__

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(getattr(logging, settings.LOG_LEVEL))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(build_formatter())
        logger.addHandler(console_handler)

        # Prevent propagation to the root logger
        logger.propagate = False

    return logger
