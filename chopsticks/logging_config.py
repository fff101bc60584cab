"""Logging configuration for the Chopsticks engine and its hosts."""

from __future__ import annotations

import json
import logging
import sys

# The handler installed by the last setup_logging call
_handler: logging.Handler | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger name and message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure logging for the application.

    Calling it again replaces the handler from the previous call, so
    each record is written once. Handlers added by others are left alone.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Emit one JSON object per line instead of plain text
    """
    global _handler

    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)

    if _handler is not None:
        logging.root.removeHandler(_handler)
        _handler.close()
    _handler = handler

    logging.root.setLevel(log_level)
    logging.root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (usually ``__name__``)."""
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "get_logger", "setup_logging"]
