"""Structured JSON logging for all Eventscope components."""

import logging
import json
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """One JSON object per record, stamped with the record's own time."""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack"] = self.formatStack(record.stack_info)
        return json.dumps(entry)


def configure_logging(level="info"):
    """Configure structured logging under the eventscope logger.

    Safe to call more than once: an existing JSON handler is reused
    rather than stacked.
    """
    root = logging.getLogger("eventscope")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(
        isinstance(h.formatter, JSONFormatter) for h in root.handlers
    ):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
    root.propagate = False
    return root
