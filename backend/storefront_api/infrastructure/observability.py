"""Request Logging: structured and console formatters for dispatched requests.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Request fields (shop, operation, method, path, status, error code) are
      rendered when the dispatcher attached them, in both formats
    - The timestamp is the record's creation time, not the time of formatting
    - setup_logging owns exactly one root handler; calling it again replaces it

Design Decisions:
    - Stdlib logging with `extra=` fields: call sites stay plain logger calls
    - httpx request logs held at WARNING: each homepage fetch would otherwise
      log a line per redirect hop
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

REQUEST_FIELDS = (
    "shop_domain", "operation", "method", "path", "status_code", "error_code",
)

_HANDLER_NAME = "storefront_api"
_NOISY_LOGGERS = ("httpx", "httpcore")


def request_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Request fields present on the record, in display order."""
    return {
        key: record.__dict__[key]
        for key in REQUEST_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, request fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **request_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable line with request fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = request_fields(record)
        if not fields:
            return line
        suffix = " ".join(f"{key}={value}" for key, value in fields.items())
        first, sep, rest = line.partition("\n")
        return f"{first} [{suffix}]{sep}{rest}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler, replacing a previous one."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ConsoleFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
