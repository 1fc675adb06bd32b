"""Abstract store client interface.

The query core talks to the document store only through this contract:
execute one query against one index and hand back the match count and
raw hit documents. Clients do NOT map, filter, or retry results.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from eventscope.models.events import SearchResult
from eventscope.models.query import StoreQuery

logger = logging.getLogger("eventscope.adapters")


class ConnectionState(str, Enum):
    """Store client connection states."""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


@dataclass
class AdapterHealth:
    """Health snapshot for a store client connection."""
    state: ConnectionState = ConnectionState.DISCONNECTED
    client_type: str = ""
    endpoint: str = ""
    last_query_at: datetime | None = None
    queries_executed: int = 0
    errors: int = 0
    message: str = ""
    checked_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


class BaseStoreClient(ABC):
    """Abstract base for document store clients.

    Health counters are guarded by a lock so one client can be shared
    across threads.

    The contract:
    - connect(): establish connection, validate accessibility
    - execute(index_name, query): run one query, return SearchResult
    - health(): report current connection state
    - disconnect(): clean up resources

    Configuration is passed as a plain dict sourced from environment
    variables (see Settings.store_config()).
    """

    def __init__(self, config: dict[str, Any]):
        self.config = config
        self._state = ConnectionState.DISCONNECTED
        self._queries_executed = 0
        self._errors = 0
        self._last_query_at: datetime | None = None
        self._last_error = ""
        self._metrics_lock = threading.Lock()

    @property
    @abstractmethod
    def client_type(self) -> str:
        """Return the client type identifier (e.g. 'search_index')."""
        ...

    @abstractmethod
    def connect(self) -> ConnectionState:
        """Establish connection to the store.

        Must not raise -- connection failures return FAILED state.
        """
        ...

    @abstractmethod
    def execute(self, index_name: str, query: StoreQuery) -> SearchResult:
        """Run a query and return the total match count and hits.

        Blocks until the full response is available. Any transport or
        server error is raised to the caller unchanged.
        """
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Release all resources and close connections."""
        ...

    @property
    def state(self) -> ConnectionState:
        return self._state

    def health(self) -> AdapterHealth:
        """Report current client health. Override for store-specific checks."""
        with self._metrics_lock:
            return AdapterHealth(
                state=self._state,
                client_type=self.client_type,
                endpoint=self.config.get("endpoint", ""),
                last_query_at=self._last_query_at,
                queries_executed=self._queries_executed,
                errors=self._errors,
                message=self._last_error,
            )

    def _record_query(self) -> None:
        """Track query metrics. Call from subclass on each executed query."""
        with self._metrics_lock:
            self._queries_executed += 1
            self._last_query_at = datetime.now(timezone.utc)

    def _record_error(self, msg: str) -> None:
        """Track errors. Call from subclass on failures."""
        with self._metrics_lock:
            self._errors += 1
            self._last_error = msg
        logger.warning(
            "Store client %s error: %s", self.client_type, msg,
        )
