"""Structured logging for host applications.

The engine itself only emits records through module loggers
(logging.getLogger(__name__)); the voucher fallback and the multiple-IVA
tie-break carry their details as `extra` fields. JsonFormatter renders
those fields so they can be audited.
"""

import json
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

_EXTRA_SKIP = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    return repr(value)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.message,
        }
        for key, value in record.__dict__.items():
            if key not in _EXTRA_SKIP:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=_json_default)


def configure_logging(log_level: str = "INFO", logger_name: str = "fiscal") -> logging.Handler:
    """Attach a JSON stream handler to the package logger.

    Returns the handler so callers (and tests) can detach it.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    return handler
