# coxeter_core/logging_config.py
"""
Logging setup for the engine.

Library modules only ever call logging.getLogger(__name__); handlers are
installed by applications through setup_logging().
"""

import json
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from .constants import LOGGER_NAMES


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "thread": threading.current_thread().name,
        }

        if hasattr(record, "extra_data"):
            log_entry.update(record.extra_data)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None,
                  json_format: bool = False) -> logging.Logger:
    """
    Install console (and optional file) handlers on the package loggers.

    Args:
        level: Logging level for handlers and loggers
        log_file: Optional path of a file to mirror records into
        json_format: Emit JSON records instead of plain text

    Returns:
        The coxeter_inversions logger
    """
    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
        )

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Remove existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    return logging.getLogger(LOGGER_NAMES[-1])
