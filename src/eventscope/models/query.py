"""Store query representation.

A StoreQuery is a flat conjunction: every clause is required, there is
no OR, negation or nesting. It renders to an Elasticsearch search body
with to_body(); nothing else about the query language is modeled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from eventscope.models.events import Order


@dataclass(frozen=True)
class TermClause:
    """Exact match on one field's value."""
    field: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"term": {self.field: self.value}}


@dataclass(frozen=True)
class PhraseClause:
    """Ordered phrase match against an analyzed field."""
    field: str
    phrase: str

    def to_dict(self) -> dict[str, Any]:
        return {"match_phrase": {self.field: self.phrase}}


@dataclass(frozen=True)
class RangeClause:
    """Strict bound on a numeric field. op is 'gt' or 'lt'."""
    field: str
    op: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {"range": {self.field: {self.op: self.value}}}


Clause = Union[TermClause, PhraseClause, RangeClause]


@dataclass(frozen=True)
class SortSpec:
    field: str
    order: Order = Order.DES

    @property
    def direction(self) -> str:
        return "desc" if self.order == Order.DES else "asc"

    def to_dict(self) -> dict[str, Any]:
        return {self.field: {"order": self.direction}}


@dataclass(frozen=True)
class StoreQuery:
    """Required clauses, one sort and a size cap."""
    sort: SortSpec
    size: int
    clauses: tuple[Clause, ...] = ()

    def to_body(self) -> dict[str, Any]:
        """Render the Elasticsearch search request body.

        track_total_hits keeps the reported total exact past the
        default 10,000 hit ceiling.
        """
        return {
            "query": {
                "bool": {"must": [c.to_dict() for c in self.clauses]},
            },
            "sort": [self.sort.to_dict()],
            "size": self.size,
            "track_total_hits": True,
        }
