"""Structured Logging - JSON formatter and setup for the client.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request extras (method, path, status_code, record_count, person_id,
      error_code, debug_info) surfaced when present
    - setup_logging is called once by the entry point, never at import time
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "method", "path", "status_code", "record_count",
    "person_id", "error_code", "debug_info",
)


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # httpx logs every request at INFO; keep it at WARNING unless debugging
    if logging.root.level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
    return handler
