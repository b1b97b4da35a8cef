"""Logging setup for the service.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where those records go and how they look.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vbapi.config import Settings

_ROOT_LOGGER = "vbapi"
_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Emit every log record as a single JSON line."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
        return json.dumps(log_data)


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a stdout handler to the package logger. Safe to call repeatedly."""
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(settings.log_level)

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = JSONFormatter(settings.app_name)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler(sys.stdout))
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    logger.propagate = False
    return logger
