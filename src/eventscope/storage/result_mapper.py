"""Raw hit document to Event mapping.

Stored documents carry no schema guarantees, so every field is read
with its own policy:

    uuid, name, message, parameters   optional, None when absent, else str()
    service, service_instance,
    endpoint                          optional, "" when absent
    type                              required, ParseError otherwise
    start_time                        required, NumberFormatError otherwise
    end_time                          optional, unset when "" or "0"

A document missing optional fields still maps. A document missing
type or start_time does not: that indicates index corruption, and the
error is raised rather than papered over with a default.
"""

from __future__ import annotations

import re
from typing import Any

from eventscope.errors import NumberFormatError
from eventscope.models.events import Event, EventType, Source
from eventscope.storage import fields

_NO_END_TIME = "0"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_hit(document: dict[str, Any]) -> Event:
    """Map one hit _source into an Event."""
    source = Source(
        service=_text(document, fields.SERVICE),
        service_instance=_text(document, fields.SERVICE_INSTANCE),
        endpoint=_text(document, fields.ENDPOINT),
    )

    end_text = _text(document, fields.END_TIME, _NO_END_TIME)
    end_time = None
    if end_text and end_text != _NO_END_TIME:
        end_time = _to_int(end_text, fields.END_TIME)

    return Event(
        uuid=_optional_text(document, fields.UUID),
        source=source,
        name=_optional_text(document, fields.NAME),
        type=EventType.parse(document.get(fields.TYPE)),
        message=_optional_text(document, fields.MESSAGE),
        parameters=_optional_text(document, fields.PARAMETERS),
        start_time=_to_int(document.get(fields.START_TIME), fields.START_TIME),
        end_time=end_time,
    )


def _optional_text(document: dict[str, Any], key: str) -> str | None:
    value = document.get(key)
    return None if value is None else str(value)


def _text(document: dict[str, Any], key: str, default: str = "") -> str:
    value = document.get(key, default)
    return default if value is None else str(value)


def _to_int(value: Any, key: str) -> int:
    """Parse the string form of an integer.

    Only an optional sign and ASCII digits are accepted: no padding,
    underscores, decimals, bools or non-ASCII digits.
    """
    if value is None or isinstance(value, bool):
        raise NumberFormatError(f"Field {key!r} is not an integer: {value!r}")
    text = str(value)
    if not _INTEGER.fullmatch(text):
        raise NumberFormatError(f"Field {key!r} is not an integer: {value!r}")
    return int(text)
