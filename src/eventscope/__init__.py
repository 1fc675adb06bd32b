"""
Eventscope - typed event search over Elasticsearch-compatible indices

Translates structured event-search conditions into index queries and
maps the stored documents back into typed event records.
"""

__version__ = "0.1.0"
