"""
Logging setup for the catalog service.

Production output is one JSON object per line (python-json-logger); with
DEBUG enabled a readable single-line format is used instead.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

from app.core.config import settings

_HANDLER_NAME = "movie-catalog"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes callers may attach through ``extra=``; copied to the JSON record when present.
CONTEXT_FIELDS = ("user_id", "movie_id")

_QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "passlib": logging.ERROR,
    "sqlalchemy.engine": logging.WARNING,
}


class CatalogJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with service metadata."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["service"] = settings.PROJECT_NAME
        log_record["version"] = settings.VERSION
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value


def _build_formatter(debug: bool) -> logging.Formatter:
    if debug:
        return logging.Formatter(
            "%(asctime)s %(levelname)-7s [%(name)s] %(message)s", datefmt=_DATE_FORMAT
        )
    return CatalogJsonFormatter("%(asctime)s %(level)s %(name)s %(message)s", datefmt=_DATE_FORMAT)


def setup_logging() -> None:
    """
    Install the stdout handler on the root logger.

    Calling it again is a no-op, so the app module and the scripts can
    both call it.
    """
    root_logger = logging.getLogger()
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_build_formatter(settings.DEBUG))

    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger; pass ``__name__``."""
    return logging.getLogger(name)
