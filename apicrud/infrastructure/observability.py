"""Structured Logging — JSON and text formatters carrying request/user context.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Context fields (request_id, user_id, error_code, ...) surfaced when present,
      in both formats
    - JSON format in production, human-readable text in development

Design Decisions:
    - Formatters over third-party libs: zero dependencies, full control
    - Text format appends context as key=value pairs so access lines and store
      events for one request can be grepped by request_id or user_id
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "request_id", "user_id", "error_code", "method", "path",
    "status_code", "duration_ms", "client_ip",
)


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with context appended, e.g. `... [request_id=ab user_id=12]`."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ContextTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
