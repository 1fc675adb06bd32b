"""Tests for structured JSON logging."""

import json
import logging
import sys

from eventscope.utils.logging import JSONFormatter, configure_logging


def test_formatter_emits_json():
    record = logging.LogRecord(
        "eventscope.storage", logging.INFO, __file__, 1,
        "matched %d events", (3,), None,
    )
    entry = json.loads(JSONFormatter().format(record))
    assert entry["level"] == "INFO"
    assert entry["component"] == "eventscope.storage"
    assert entry["message"] == "matched 3 events"
    assert "exception" not in entry


def test_formatter_includes_exception():
    try:
        raise ValueError("bad start_time")
    except ValueError:
        record = logging.LogRecord(
            "eventscope", logging.ERROR, __file__, 1,
            "mapping failed", (), sys.exc_info(),
        )
    entry = json.loads(JSONFormatter().format(record))
    assert "bad start_time" in entry["exception"]


def test_configure_logging_is_idempotent():
    root = configure_logging("debug")
    configure_logging("debug")
    json_handlers = [
        h for h in root.handlers if isinstance(h.formatter, JSONFormatter)
    ]
    assert len(json_handlers) == 1
    assert root.level == logging.DEBUG
    assert root.propagate is False


def test_timestamp_is_record_time():
    record = logging.LogRecord(
        "eventscope", logging.INFO, __file__, 1, "query done", (), None,
    )
    record.created = 0.0
    entry = json.loads(JSONFormatter().format(record))
    assert entry["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_stack_info_included():
    record = logging.LogRecord(
        "eventscope", logging.WARNING, __file__, 1, "slow query", (), None,
        sinfo="Stack (most recent call last):\n  frame",
    )
    entry = json.loads(JSONFormatter().format(record))
    assert "frame" in entry["stack"]
