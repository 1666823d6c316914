"""Structured Logging — JSON formatter and idempotent root logger setup.

Invariants:
    - Every JSON line has timestamp (the record's creation time), level, logger, message
    - Request-scoped extras (school_id, count, field, ...) surfaced only when present
    - At most one School Finder handler on the root logger, however often setup runs
"""

import logging
import json
from datetime import datetime, timezone


HANDLER_NAME = "schoolfinder"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

EXTRA_FIELDS = (
    "school_id", "error_code", "path", "count", "operation", "field",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the app handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
