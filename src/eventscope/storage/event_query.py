"""Event query orchestration.

Drives one search end to end: build the store query from the caller's
condition, execute it through the store client, and map every hit back
into an Event in the order the store returned them.

There is no retry, no follow-up paging and no per-document isolation.
A store failure or an unmappable hit fails the whole call.
"""

from __future__ import annotations

import logging

from eventscope.adapters.base import BaseStoreClient
from eventscope.models.events import EventQueryCondition, Events
from eventscope.storage import fields
from eventscope.storage.query_builder import build_query
from eventscope.storage.result_mapper import parse_hit

logger = logging.getLogger("eventscope.storage.event_query")


class EventQueryService:
    """Stateless event search over one index.

    Holds only the store client and index name; concurrent calls share
    nothing else.
    """

    def __init__(
        self,
        client: BaseStoreClient,
        index_name: str = fields.INDEX_NAME,
    ):
        self.client = client
        self.index_name = index_name

    def query_events(self, condition: EventQueryCondition) -> Events:
        """Search events matching condition.

        Returns:
            Events whose total is the store's full match count and whose
            events are at most condition.size mapped hits.

        Raises:
            ParseError: a hit has a missing or unknown type.
            NumberFormatError: a hit has an unparsable start or end time.
            Any error raised by the store client, unchanged.
        """
        query = build_query(condition)
        logger.debug(
            "Querying '%s' with %d clauses, size %d",
            self.index_name, len(query.clauses), query.size,
        )

        result = self.client.execute(self.index_name, query)

        events = Events(
            total=result.total_count,
            events=[parse_hit(doc) for doc in result.hits],
        )
        logger.debug(
            "Mapped %d of %d matching events", len(events.events), events.total
        )
        return events
