"""Structured Logging: JSON formatter and setup for the roster process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (roll_number, error_code, path, line_number, record_count)
      surfaced when present
    - Logs go to stderr so they never interleave with menu output on stdout

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging covers it
    - setup_logging called on startup from main(); calling it again swaps
      its handler instead of stacking a second one
"""

import logging
import json
import sys
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "roll_number", "error_code", "path", "line_number", "record_count",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


# Handler installed by the last setup_logging() call
_installed_handler: logging.Handler | None = None


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure the root logger, replacing any handler from an earlier call."""
    global _installed_handler
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    _installed_handler = handler
    return handler
