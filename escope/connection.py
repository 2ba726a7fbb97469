"""Holds the connection settings in use and the client built from them."""

from __future__ import annotations

from typing import Optional

from escope import constants
from escope.client import ElasticClientError, ElasticsearchClient
from escope.config import ConfigStore, ConnectionConfig, HostNotFoundError


class ConnectionManager:
    """Tracks the current connection settings and lazily creates a client."""

    def __init__(self, store: Optional[ConfigStore] = None) -> None:
        self.store = store if store is not None else ConfigStore()
        self.config = ConnectionConfig()
        self._client: Optional[ElasticsearchClient] = None

    def set_config(self, config: ConnectionConfig) -> None:
        """Use new settings; the next client() call builds a fresh client."""
        self.config = config
        self._client = None

    def clear_config(self) -> None:
        self.set_config(ConnectionConfig())

    def load_config_from_file(self, alias: str) -> None:
        """Use the settings saved under an alias."""
        self.set_config(self.store.load_host(alias))

    def saved_config(self, alias: str) -> ConnectionConfig:
        """Return the saved settings for an alias, or empty settings."""
        try:
            return self.store.load_host(alias)
        except (HostNotFoundError, OSError, ValueError):
            return ConnectionConfig()

    def list_saved_configs(self) -> list[str]:
        return self.store.list_hosts()

    def active_host(self) -> str:
        return self.store.get_active_host()

    def client(self) -> Optional[ElasticsearchClient]:
        """Return the client for the current settings, or None if there are none.

        Without settings, the first saved alias is used.
        """
        if not self.config.host:
            try:
                aliases = self.list_saved_configs()
            except (OSError, ValueError):
                return None
            if not aliases:
                return None
            try:
                self.load_config_from_file(aliases[0])
            except (HostNotFoundError, OSError, ValueError):
                pass

        if not self.config.host:
            return None

        if self._client is None:
            self._client = ElasticsearchClient(
                self.config.host,
                self.config.username,
                self.config.password,
                self.config.secure,
            )
        return self._client


def test_connection(config: ConnectionConfig, timeout_seconds: float) -> None:
    """Ping the host in the settings; raise if it cannot be reached."""
    if not config.host:
        raise ValueError(constants.ERR_HOST_IS_REQUIRED)

    with ElasticsearchClient(
        config.host,
        config.username,
        config.password,
        config.secure,
        timeout=timeout_seconds,
    ) as client:
        try:
            client.ping()
        except ElasticClientError as exc:
            if exc.status is not None:
                raise ElasticClientError(
                    f"connection failed with status: {exc}", exc.status
                ) from exc
            raise ElasticClientError(f"connection failed: {exc}") from exc