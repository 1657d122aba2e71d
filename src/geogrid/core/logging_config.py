"""
Logging setup for applications embedding geogrid.

Library modules only create loggers under the ``geogrid`` namespace and log
rejected input and conversions at DEBUG, passing ``raw_input`` and
``system`` as record extras. Nothing here runs on import; setup_logging()
attaches a single handler to the ``geogrid`` logger and leaves the root
logger alone.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from geogrid.core.config import settings

LOGGER_NAME = "geogrid"

# Extras the factories attach to their records
CONTEXT_FIELDS = ("raw_input", "system")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including the geogrid context extras."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_log_level(level_name: str) -> int:
    """
    Convert a level name to its logging constant.

    Args:
        level_name: DEBUG, INFO, WARNING, ERROR or CRITICAL, any case

    Returns:
        Logging level constant, INFO for unknown names
    """
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Send geogrid's log records to a stream.

    Calling it again replaces the handler it installed before.

    Args:
        log_level: Level name; taken from settings when omitted
        json_logs: Emit JSON lines; taken from settings when omitted
        stream: Destination, stderr by default

    Returns:
        The configured ``geogrid`` logger
    """
    if log_level is None:
        log_level = settings.resolved_log_level
    if json_logs is None:
        json_logs = settings.json_logs

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    handler.set_name(LOGGER_NAME)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == LOGGER_NAME:
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    logger.setLevel(get_log_level(log_level))

    logger.debug(f"Logging initialized: level={log_level}, json_logs={json_logs}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the geogrid namespace.

    Args:
        name: Module name (typically __name__); names outside the namespace
            are nested under it

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
