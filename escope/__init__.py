"""Elasticsearch connection management, REST client and connection-check command."""

__version__ = "0.1.0"