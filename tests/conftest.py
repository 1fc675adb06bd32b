"""Pytest configuration for Eventscope test suite."""

import os

# Ensure test environment variables are set before any imports
os.environ.setdefault("EVENTSCOPE_LOG_LEVEL", "warning")
os.environ.setdefault("EVENTSCOPE_STORE_ENDPOINT", "http://localhost:9200")

import pytest


class FakeElasticsearch:
    """In-process stand-in for the elasticsearch client.

    Records every search call and replays a canned response, or raises
    the configured error.
    """

    def __init__(self, response=None, error=None, info_error=None):
        self.response = response if response is not None else {
            "hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}
        }
        self.error = error
        self.info_error = info_error
        self.searches: list[dict] = []
        self.closed = False

    def info(self):
        if self.info_error is not None:
            raise self.info_error
        return {"version": {"number": "7.17.0"}}

    def search(self, index, body):
        self.searches.append({"index": index, "body": body})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def fake_es():
    return FakeElasticsearch()


def _make_response(sources: list[dict], total=None) -> dict:
    """Build a search response body around hit sources."""
    if total is None:
        total = {"value": len(sources), "relation": "eq"}
    return {
        "hits": {
            "total": total,
            "hits": [
                {"_index": "events", "_id": str(i), "_source": s}
                for i, s in enumerate(sources)
            ],
        }
    }


@pytest.fixture
def make_response():
    return _make_response
