"""Search index store client.

Executes event queries against Elasticsearch-compatible search index
APIs. One blocking search per query; the hit documents are returned
as stored, without mapping.

Supports Elasticsearch 7.x (http_auth) and 8.x (basic_auth) client APIs.
TLS with custom CA certificates for production deployments.
"""

from __future__ import annotations

import logging
import ssl
from typing import Any

from elasticsearch import Elasticsearch
from elasticsearch import __version__ as es_version

from eventscope.adapters.base import BaseStoreClient, ConnectionState
from eventscope.errors import StoreNotConnectedError
from eventscope.models.events import SearchResult
from eventscope.models.query import StoreQuery

logger = logging.getLogger("eventscope.adapters.search_index")

# 8.x renamed http_auth; the old name still works there but warns.
AUTH_PARAM = "basic_auth" if es_version[0] >= 8 else "http_auth"


class ElasticsearchStoreClient(BaseStoreClient):
    """Store client for Elasticsearch-compatible search indices.

    Required config keys:
        endpoint: str        - Elasticsearch URL (e.g. https://host:9200)

    Optional config keys:
        auth_user: str       - Username for authentication
        auth_password: str   - Password for authentication
        tls_verify: bool     - Verify TLS certificates (default: True)
        ca_cert: str         - Path to CA certificate file
        request_timeout: int - Seconds before a search times out (default: 30)

    A pre-built client may be passed as ``client``; connect() then
    validates it instead of constructing a new one.
    """

    def __init__(
        self,
        config: dict[str, Any],
        client: Elasticsearch | None = None,
    ):
        super().__init__(config)
        self._client: Elasticsearch | None = client
        self._tls_verify = config.get("tls_verify", True)
        self._ca_cert = config.get("ca_cert", "")
        self._request_timeout = int(config.get("request_timeout", 30))

    @property
    def client_type(self) -> str:
        return "search_index"

    def _build_ssl_context(self) -> ssl.SSLContext:
        """SSL context for https endpoints.

        A configured CA bundle replaces the default trust store.
        tls_verify=False turns off both hostname and certificate checks.
        """
        ctx = ssl.create_default_context(cafile=self._ca_cert or None)
        if not self._tls_verify:
            ctx.check_hostname = False
            ctx.verify_mode = ssl.CERT_NONE
        return ctx

    def _build_client(self) -> Elasticsearch:
        endpoint = self.config["endpoint"]
        auth_user = self.config.get("auth_user", "")
        auth_password = self.config.get("auth_password", "")

        client_kwargs: dict[str, Any] = {
            "hosts": [endpoint],
            "request_timeout": self._request_timeout,
        }
        if str(endpoint).startswith("https"):
            client_kwargs["ssl_context"] = self._build_ssl_context()

        if auth_user and auth_password:
            client_kwargs[AUTH_PARAM] = (auth_user, auth_password)

        return Elasticsearch(**client_kwargs)

    def connect(self) -> ConnectionState:
        """Connect to Elasticsearch and validate the cluster responds."""
        self._state = ConnectionState.CONNECTING
        try:
            if self._client is None:
                self._client = self._build_client()

            info = self._client.info()
            version = info.get("version", {}).get("number", "unknown")
            self._state = ConnectionState.CONNECTED
            logger.info(
                "Connected to Elasticsearch %s at %s",
                version, self.config.get("endpoint", ""),
            )
        except Exception as e:
            self._state = ConnectionState.FAILED
            self._record_error(f"Connection failed: {e}")

        return self._state

    def execute(self, index_name: str, query: StoreQuery) -> SearchResult:
        """Run one search and return the total match count and hit sources.

        Errors from the client are counted and then re-raised as-is.
        """
        if not self._client or self._state != ConnectionState.CONNECTED:
            raise StoreNotConnectedError(
                "Cannot execute query: store client not connected"
            )

        try:
            resp = self._client.search(index=index_name, body=query.to_body())
            hits = resp["hits"]
            total = _total_hits(hits["total"])
            documents = [hit.get("_source", {}) for hit in hits.get("hits", [])]
        except Exception as e:
            self._record_error(f"Query on '{index_name}' failed: {e}")
            raise

        self._record_query()
        logger.debug(
            "Query on '%s' matched %d, returned %d",
            index_name, total, len(documents),
        )
        return SearchResult(total_count=total, hits=documents)

    def disconnect(self) -> None:
        """Close the Elasticsearch client connection."""
        if self._client:
            self._client.close()
            self._client = None
        self._state = ConnectionState.DISCONNECTED
        logger.info("Store client disconnected")


def _total_hits(total: Any) -> int:
    """Read hits.total in either the 7.x object form or the legacy int form."""
    if isinstance(total, dict):
        return int(total["value"])
    return int(total)
