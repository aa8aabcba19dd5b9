"""
Shared Logger

Log records from the back office carry correlation fields (request, user,
order, delivery route) in `extra_data`. The JSON formatter lifts them to
top-level keys so log pipelines can filter on them; the console formatters
append them after the message.
"""

import copy
import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVICE_NAME = "backoffice"

# Promoted out of extra_data, in this order
CORRELATION_FIELDS = ("request_id", "user_id", "order_id", "route_id")

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "aiosqlite", "asyncio")


def split_context(extra_data: dict[str, Any] | None) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a record's extra_data into (correlation fields, everything else)."""
    if not extra_data:
        return {}, {}
    correlation = {
        key: extra_data[key] for key in CORRELATION_FIELDS if extra_data.get(key) is not None
    }
    rest = {key: value for key, value in extra_data.items() if key not in CORRELATION_FIELDS}
    return correlation, rest


class JSONFormatter(logging.Formatter):
    """One JSON object per record, tagged with service and environment."""

    def __init__(self, service: str = SERVICE_NAME, environment: str | None = None):
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }
        if self.environment:
            log_data["environment"] = self.environment

        correlation, rest = split_context(getattr(record, "extra_data", None))
        log_data.update(correlation)
        if rest:
            log_data["extra"] = rest

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """Plain formatter that appends correlation fields, e.g. `[request_id=ab12 user_id=...]`."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        correlation, _ = split_context(getattr(record, "extra_data", None))
        if not correlation:
            return line
        tags = " ".join(f"{key}={value}" for key, value in correlation.items())
        return f"{line} [{tags}]"


class ColoredFormatter(ContextFormatter):
    """Console formatter with ANSI-colored level names."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Copy so other handlers still see the bare level name
        record = copy.copy(record)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class ContextLogger:
    """Logger that attaches a fixed context to every record as `extra_data`."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    def with_context(self, **kwargs) -> "ContextLogger":
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, **kwargs) -> None:
        self._logger.log(level, message, extra={"extra_data": {**self._context, **kwargs}})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    environment: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json', or 'plain'
        environment: Stamped on JSON records
        log_file: Optional file path for JSON file logging
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if format_type == "json":
        console_handler.setFormatter(JSONFormatter(environment=environment))
    elif format_type == "colored":
        console_handler.setFormatter(ColoredFormatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(ContextFormatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter(environment=environment))
        root_logger.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """Context-aware logger; `context` is attached to every record."""
    return ContextLogger(name, context)
