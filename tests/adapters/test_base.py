"""Tests for shared store client health tracking."""

import threading

from eventscope.adapters.base import BaseStoreClient, ConnectionState
from eventscope.models.events import SearchResult


class CountingClient(BaseStoreClient):
    """Minimal client that only records metrics."""

    @property
    def client_type(self) -> str:
        return "counting"

    def connect(self) -> ConnectionState:
        self._state = ConnectionState.CONNECTED
        return self._state

    def execute(self, index_name, query) -> SearchResult:
        self._record_query()
        return SearchResult()

    def disconnect(self) -> None:
        self._state = ConnectionState.DISCONNECTED


class TestHealthCounters:
    """Counters stay exact when one client serves many threads."""

    def test_concurrent_queries_all_counted(self):
        client = CountingClient({"endpoint": "memory://"})
        client.connect()

        def worker():
            for _ in range(200):
                client.execute("events", None)
                client._record_error("boom")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        health = client.health()
        assert health.queries_executed == 1600
        assert health.errors == 1600
        assert health.message == "boom"
        assert health.last_query_at is not None
