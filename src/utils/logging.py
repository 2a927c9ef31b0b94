"""Logging configuration for the application."""

import logging
import os
import sys
from collections.abc import Iterable
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Placeholder shown for log lines emitted outside of a request
NO_REQUEST_ID = "-"

request_id_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)


class RequestIdFilter(logging.Filter):
    """Attach the current request ID to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Set ``record.request_id`` from the active request context.

        :param record: The log record being emitted.
        :returns: Always True, records are never dropped.
        """
        record.request_id = request_id_var.get()
        return True


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _set_logger_levels(names: Iterable[str], level: int) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def configure_logging() -> None:
    """Configure application-wide logging to stdout only.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
      - LOG_UVICORN_ACCESS: true/false (default false)
      - LOG_SQL: true/false, echo SQLAlchemy statements (default false)
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO")
    level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    # Server loggers propagate to the root handler instead of printing twice.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lib_logger = logging.getLogger(name)
        lib_logger.handlers.clear()
        lib_logger.propagate = True

    access_enabled = os.environ.get("LOG_UVICORN_ACCESS", "false").strip().lower() == "true"
    if not access_enabled:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    sql_enabled = os.environ.get("LOG_SQL", "false").strip().lower() == "true"
    sql_level = logging.INFO if sql_enabled else max(level, logging.WARNING)
    _set_logger_levels(("sqlalchemy.engine", "sqlalchemy.pool"), level=sql_level)
    _set_logger_levels(("urllib3",), level=max(level, logging.INFO))

    logging.getLogger(__name__).info("Logging configured: level=%s", level_name.upper())
