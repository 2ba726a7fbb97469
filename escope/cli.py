"""Command-line entry point: resolve the connection and check the cluster answers."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from escope import constants
from escope.client import ElasticClientError
from escope.config import ConnectionConfig
from escope.connection import ConnectionManager

_SWITCH_HINT = "Use 'escope config switch <alias>' to set an active host."


class ConfigurationError(Exception):
    """Raised when no usable connection settings can be resolved."""

    def __init__(self, message: str, details: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.details = list(details)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="escope", description="escope: Elasticsearch auto diagnostics"
    )
    parser.add_argument(
        "-H", "--host", default="",
        help="Elasticsearch host address (required for most commands)",
    )
    parser.add_argument(
        "-u", "--username", default="", help="Username (required in secure mode)"
    )
    parser.add_argument(
        "-p", "--password", default="", help="Password (required in secure mode)"
    )
    parser.add_argument(
        "--secure", action="store_true",
        help="Connect with username and password (default: false)",
    )
    parser.add_argument(
        "-a", "--alias", default="",
        help="Use a saved host alias instead of specifying connection details",
    )
    return parser


def _bullets(aliases: Sequence[str]) -> list[str]:
    return [f"  - {alias}" for alias in aliases]


def _saved_aliases(manager: ConnectionManager) -> Optional[list[str]]:
    try:
        return manager.list_saved_configs()
    except (OSError, ValueError):
        return None


def validate_config(manager: ConnectionManager, args: argparse.Namespace) -> None:
    """Choose the connection settings from flags, an alias or the active host."""
    if args.alias:
        saved = manager.saved_config(args.alias)
        if not saved.host:
            details = [f"Error: Host alias '{args.alias}' not found. Available aliases:"]
            aliases = _saved_aliases(manager)
            if aliases:
                details += _bullets(aliases)
            else:
                details.append(
                    "No hosts configured. Use 'escope config --help' to set up hosts."
                )
            raise ConfigurationError(f"host alias '{args.alias}' not found", details)
        manager.set_config(saved)
        return

    if args.host:
        manager.set_config(
            ConnectionConfig(
                host=args.host,
                username=args.username,
                password=args.password,
                secure=args.secure,
            )
        )
        return

    aliases = _saved_aliases(manager)
    if not aliases:
        raise ConfigurationError(
            "no configuration found",
            [
                constants.ERR_NO_CONFIGURATION_FOUND,
                constants.MSG_PLEASE_SET_CONFIGURATION,
                constants.MSG_CONFIG_SET_EXAMPLE,
                "",
                constants.MSG_EXAMPLE_HEADER,
                constants.MSG_CONFIG_SET_LOCALHOST,
                constants.MSG_CONFIG_SET_SECURE,
                "",
                constants.MSG_USE_FLAGS_DIRECTLY,
                constants.MSG_USE_FLAGS_EXAMPLE,
            ],
        )

    try:
        active = manager.active_host()
    except (OSError, ValueError):
        active = ""
    if not active:
        raise ConfigurationError(
            "no active host set",
            ["Error: No active host set.", "Available hosts:", *_bullets(aliases), "",
             _SWITCH_HINT],
        )

    saved = manager.saved_config(active)
    if not saved.host:
        raise ConfigurationError(
            f"active host '{active}' not found",
            [f"Error: Active host '{active}' not found. Available hosts:",
             *_bullets(aliases), "", _SWITCH_HINT],
        )
    manager.set_config(saved)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Resolve the connection and ping the cluster; return the exit status."""
    args = build_parser().parse_args(argv)
    manager = ConnectionManager()
    try:
        validate_config(manager, args)
    except ConfigurationError as exc:
        for line in exc.details:
            print(line)
        return 1

    client = manager.client()
    if client is None:
        print(constants.ERR_NO_CONFIGURATION_FOUND)
        print(constants.MSG_PLEASE_SET_CONFIGURATION)
        return 1

    with client:
        try:
            client.ping()
        except ElasticClientError as exc:
            template = (
                constants.ERR_CONNECTION_FAILED_RESPONSE
                if exc.status is not None
                else constants.ERR_CONNECTION_FAILED
            )
            print(template % exc)
            return 1
    print(constants.MSG_CONNECTION_SUCCESSFUL)
    return 0