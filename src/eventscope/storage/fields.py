"""Stored field names for event records.

These names are the contract with documents already in the index and
must not change. The analyzed endpoint variant is always derived with
match_field_name() rather than spelled out.
"""

INDEX_NAME = "events"

UUID = "uuid"
SERVICE = "service"
SERVICE_INSTANCE = "service_instance"
ENDPOINT = "endpoint"
NAME = "name"
TYPE = "type"
MESSAGE = "message"
PARAMETERS = "parameters"
START_TIME = "start_time"
END_TIME = "end_time"

MATCH_SUFFIX = "_match"


def match_field_name(column: str) -> str:
    """Name of the analyzed (full-text) copy of a keyword column."""
    return column + MATCH_SUFFIX


def index_name(namespace: str = "") -> str:
    """Physical index for event records, prefixed by an optional namespace."""
    namespace = namespace.strip().lower()
    if not namespace:
        return INDEX_NAME
    return f"{namespace}_{INDEX_NAME}"
