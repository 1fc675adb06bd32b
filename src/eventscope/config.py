"""Eventscope configuration via environment variables.

Store connection settings are read from EVENTSCOPE_STORE_* variables.
Pointing Eventscope at a different cluster requires only changing
variables in .env -- no code changes.
"""

import os
import logging

from eventscope.storage.fields import index_name

logger = logging.getLogger("eventscope.config")


class StoreConfig:
    """Connection settings for the document store, parsed from environment."""

    def __init__(self, raw: dict[str, str]):
        self.endpoint = raw.get("endpoint", "http://localhost:9200")
        self.auth_user = raw.get("user", "")
        self.auth_password = raw.get("password", "")
        self.ca_cert = raw.get("ca_cert", "")
        self.tls_verify = raw.get("tls_verify", "true").lower() == "true"
        self.request_timeout = int(raw.get("request_timeout", "30"))
        self.namespace = raw.get("namespace", "")

    def to_client_config(self) -> dict[str, object]:
        """Convert to the dict format store clients expect."""
        return {
            "endpoint": self.endpoint,
            "auth_user": self.auth_user,
            "auth_password": self.auth_password,
            "ca_cert": self.ca_cert,
            "tls_verify": self.tls_verify,
            "request_timeout": self.request_timeout,
        }


class Settings:
    """All configuration sourced from environment."""

    def __init__(self):
        # Core
        self.version = "0.1.0"
        self.log_level = os.environ.get("EVENTSCOPE_LOG_LEVEL", "info")
        self.api_port = int(os.environ.get("EVENTSCOPE_API_PORT", "8080"))

        # Document store
        self.store = StoreConfig(self._collect("EVENTSCOPE_STORE_"))
        self.index_name = index_name(self.store.namespace)

    def store_config(self) -> dict[str, object]:
        return self.store.to_client_config()

    @staticmethod
    def _collect(prefix: str) -> dict[str, str]:
        """Gather variables sharing a prefix, keyed by lowercased suffix."""
        raw: dict[str, str] = {}
        for key, val in os.environ.items():
            if key.startswith(prefix):
                raw[key[len(prefix):].lower()] = val

        logger.debug(
            "Loaded %d store settings from %s* variables", len(raw), prefix
        )
        return raw


settings = Settings()
