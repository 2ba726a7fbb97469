"""Persistent store of named host connections and application settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from escope import constants


class HostNotFoundError(LookupError):
    """Raised when a host alias is not present in the configuration file."""

    def __init__(self, alias: str) -> None:
        super().__init__(constants.ERR_HOST_NOT_FOUND % alias)
        self.alias = alias


@dataclass
class ConnectionConfig:
    host: str = ""
    username: str = ""
    password: str = ""
    secure: bool = False


@dataclass
class AppConfig:
    connection_timeout: int = 0


@dataclass
class HostConfig:
    config: AppConfig = field(default_factory=AppConfig)
    hosts: dict[str, ConnectionConfig] = field(default_factory=dict)
    active_host: str = ""


def default_config_path() -> Path:
    """Return the configuration file path in the user's home directory."""
    return Path.home() / constants.CONFIG_FILE_PATH


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _parse_host(raw: Any) -> ConnectionConfig:
    if not isinstance(raw, dict):
        raw = {}
    return ConnectionConfig(
        host=_text(raw.get("host")),
        username=_text(raw.get("username")),
        password=_text(raw.get("password")),
        secure=bool(raw.get("secure", False)),
    )


class ConfigStore:
    """Reads and writes the YAML configuration file."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else default_config_path()

    def load(self) -> HostConfig:
        """Load the configuration; a missing file yields the defaults."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return HostConfig(
                config=AppConfig(connection_timeout=constants.DEFAULT_CONFIG_TIMEOUT)
            )
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid config file: {exc}") from exc
        if data is None:
            raise ValueError("invalid config file: empty document")
        if not isinstance(data, dict):
            raise ValueError("invalid config file: expected a mapping")

        app_raw = data.get("config") or {}
        if not isinstance(app_raw, dict):
            raise ValueError("invalid config file: 'config' must be a mapping")
        try:
            timeout = int(app_raw.get("connection_timeout") or 0)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid config file: {exc}") from exc
        if timeout == 0:
            timeout = constants.DEFAULT_CONFIG_TIMEOUT_2

        hosts_raw = data.get("hosts") or {}
        if not isinstance(hosts_raw, dict):
            raise ValueError("invalid config file: 'hosts' must be a mapping")
        hosts = {str(alias): _parse_host(raw) for alias, raw in hosts_raw.items()}

        return HostConfig(
            config=AppConfig(connection_timeout=timeout),
            hosts=hosts,
            active_host=_text(data.get("active_host")),
        )

    def save(self, cfg: HostConfig) -> None:
        """Write the whole configuration, replacing the file."""
        document: dict[str, Any] = {
            "config": {"connection_timeout": cfg.config.connection_timeout},
            "hosts": {alias: asdict(conn) for alias, conn in cfg.hosts.items()},
        }
        if cfg.active_host:
            document["active_host"] = cfg.active_host
        with self.path.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(document, handle, default_flow_style=False, sort_keys=False)

    def save_host(self, alias: str, conn_cfg: ConnectionConfig) -> None:
        """Store a host; the first host saved becomes the active one."""
        try:
            host_cfg = self.load()
        except (OSError, ValueError):
            host_cfg = HostConfig()
        if not host_cfg.hosts:
            host_cfg.active_host = alias
        host_cfg.hosts[alias] = conn_cfg
        self.save(host_cfg)

    def load_host(self, alias: str) -> ConnectionConfig:
        """Return the connection saved under an alias."""
        hosts = self.load().hosts
        if alias not in hosts:
            raise HostNotFoundError(alias)
        return hosts[alias]

    def list_hosts(self) -> list[str]:
        """Return the saved aliases in sorted order."""
        return sorted(self.load().hosts)

    def delete_host(self, alias: str) -> None:
        """Remove a host, clearing the active host if it was that one."""
        host_cfg = self.load()
        if alias not in host_cfg.hosts:
            raise HostNotFoundError(alias)
        del host_cfg.hosts[alias]
        if host_cfg.active_host == alias:
            host_cfg.active_host = constants.EMPTY_STRING
        self.save(host_cfg)

    def set_active_host(self, alias: str) -> None:
        """Make a saved alias the active host."""
        self.load_host(alias)
        host_cfg = self.load()
        host_cfg.active_host = alias
        self.save(host_cfg)

    def get_active_host(self) -> str:
        return self.load().active_host

    def clear_active_host(self) -> None:
        host_cfg = self.load()
        host_cfg.active_host = constants.EMPTY_STRING
        self.save(host_cfg)

    def app_config(self) -> AppConfig:
        return self.load().config

    def connection_timeout(self) -> int:
        """Return the connection timeout in seconds."""
        return self.app_config().connection_timeout

    def set_connection_timeout(self, timeout: int) -> None:
        host_cfg = self.load()
        host_cfg.config.connection_timeout = timeout
        self.save(host_cfg)