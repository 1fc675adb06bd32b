"""Eventscope service entrypoint."""

import logging
from fastapi import FastAPI
from eventscope.adapters.search_index import ElasticsearchStoreClient
from eventscope.config import settings
from eventscope.storage.event_query import EventQueryService
from eventscope.utils.logging import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger("eventscope")

store_client = ElasticsearchStoreClient(settings.store_config())
event_queries = EventQueryService(store_client, settings.index_name)

app = FastAPI(
    title="Eventscope",
    description="Typed event search over Elasticsearch-compatible indices",
    version=settings.version,
)


@app.on_event("startup")
def startup():
    logger.info("Eventscope v%s starting", settings.version)
    logger.info("Log level: %s", settings.log_level)
    logger.info("API port: %s", settings.api_port)
    logger.info("Store: %s index '%s'", settings.store.endpoint, settings.index_name)
    store_client.connect()


@app.on_event("shutdown")
def shutdown():
    store_client.disconnect()


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": settings.version,
        "store": store_client.health().state.value,
    }
