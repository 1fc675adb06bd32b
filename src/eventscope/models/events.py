"""Event search data model.

The query condition flows in from upstream callers, the search result
flows out of the store client, and the Event records are what callers
get back. All models are immutable once constructed -- the query core
only reads them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from eventscope.errors import ParseError


class EventType(str, Enum):
    """Event classifications, valued by their stored string form."""
    NORMAL = "Normal"
    ERROR = "Error"

    @classmethod
    def parse(cls, value: Any) -> "EventType":
        """Look up a stored type string, ignoring case.

        Raises ParseError for None or any string outside the known set.
        There is no fallback member.
        """
        if value is None:
            raise ParseError("Event type is missing")
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise ParseError(f"Unknown event type: {value!r}") from None

    @classmethod
    def _missing_(cls, value: object) -> "EventType | None":
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class Order(str, Enum):
    """Sort direction on event start time."""
    ASC = "ASC"
    DES = "DES"


class Source(BaseModel):
    """Where an event originated. Each part is independently optional."""
    service: Optional[str] = None
    service_instance: Optional[str] = None
    endpoint: Optional[str] = None

    class Config:
        frozen = True


class TimeWindow(BaseModel):
    """Epoch-millisecond bounds. Zero means the bound is not applied."""
    start: int = 0
    end: int = 0

    class Config:
        frozen = True


class EventQueryCondition(BaseModel):
    """Caller-supplied filter for an event search.

    Every filter is optional. size is passed to the store untouched;
    callers own its validation.
    """
    uuid: Optional[str] = Field(
        default=None,
        description="Exact event id"
    )
    source: Optional[Source] = Field(
        default=None,
        description="Service, instance and endpoint filters"
    )
    name: Optional[str] = Field(
        default=None,
        description="Exact event name"
    )
    type: Optional[EventType] = Field(
        default=None,
        description="Event type filter"
    )
    time: Optional[TimeWindow] = Field(
        default=None,
        description="Start/end bounds in epoch millis"
    )
    order: Optional[Order] = Field(
        default=None,
        description="Sort direction on start time; descending when unset"
    )
    size: int = Field(
        description="Maximum number of events to return"
    )

    class Config:
        frozen = True

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return EventType.parse(value)
        return value


class Event(BaseModel):
    """A single event record mapped back from the store."""
    uuid: Optional[str] = None
    source: Source = Field(default_factory=Source)
    name: Optional[str] = None
    type: EventType
    message: Optional[str] = None
    parameters: Optional[str] = Field(
        default=None,
        description="Opaque parameter payload as stored"
    )
    start_time: int
    end_time: Optional[int] = Field(
        default=None,
        description="Unset when the stored value was empty or 0"
    )

    class Config:
        frozen = True


class Events(BaseModel):
    """One page of events plus the full match count."""
    total: int = Field(
        default=0,
        description="Matches in the store before size limiting"
    )
    events: list[Event] = Field(
        default_factory=list,
        description="Events in the order the store returned them"
    )


class SearchResult(BaseModel):
    """Raw response from a store client: match count and hit documents."""
    total_count: int = 0
    hits: list[dict[str, Any]] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def size(self) -> int:
        return len(self.hits)
