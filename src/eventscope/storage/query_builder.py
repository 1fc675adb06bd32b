"""Condition to store query translation.

Every filter in an EventQueryCondition is optional and independent.
A filter contributes exactly one required clause when it carries a
real value and nothing otherwise -- empty strings, None and zero time
bounds never become placeholder clauses. The builder does not
validate; it never raises.
"""

from __future__ import annotations

from eventscope.models.events import EventQueryCondition, Order
from eventscope.models.query import (
    Clause,
    PhraseClause,
    RangeClause,
    SortSpec,
    StoreQuery,
    TermClause,
)
from eventscope.storage import fields


def build_query(condition: EventQueryCondition) -> StoreQuery:
    """Build the conjunctive query, start-time sort and size cap.

    Args:
        condition: Caller filter. Only read.

    Returns:
        StoreQuery with clauses in a fixed order: uuid, service,
        service instance, endpoint, name, type, start bound, end bound.
    """
    clauses: list[Clause] = []

    if condition.uuid:
        clauses.append(TermClause(fields.UUID, condition.uuid))

    source = condition.source
    if source is not None:
        if source.service:
            clauses.append(TermClause(fields.SERVICE, source.service))
        if source.service_instance:
            clauses.append(
                TermClause(fields.SERVICE_INSTANCE, source.service_instance)
            )
        if source.endpoint:
            clauses.append(PhraseClause(
                fields.match_field_name(fields.ENDPOINT), source.endpoint
            ))

    if condition.name:
        clauses.append(TermClause(fields.NAME, condition.name))

    if condition.type is not None:
        clauses.append(TermClause(fields.TYPE, condition.type.value))

    window = condition.time
    if window is not None:
        if window.start > 0:
            clauses.append(RangeClause(fields.START_TIME, "gt", window.start))
        if window.end > 0:
            clauses.append(RangeClause(fields.END_TIME, "lt", window.end))

    order = condition.order if condition.order is not None else Order.DES

    return StoreQuery(
        sort=SortSpec(fields.START_TIME, order),
        size=condition.size,
        clauses=tuple(clauses),
    )
