"""HTTP client for the Elasticsearch REST API used by the diagnostics commands."""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional, Protocol

import httpx

from escope import constants

_INDEX_KEYS = (
    constants.HEALTH_FIELD,
    constants.STATUS_FIELD,
    constants.DOCS_COUNT_FIELD,
    constants.STORE_SIZE_FIELD,
    constants.PRIMARY_FIELD,
    constants.REPLICA_FIELD,
)

_SHARD_KEYS = (
    constants.INDEX_FIELD,
    constants.SHARD_FIELD,
    constants.PRIREP_FIELD,
    constants.STATE_FIELD,
    constants.DOCS_FIELD,
    constants.STORE_FIELD,
    constants.IP_FIELD,
    constants.NODE_FIELD_KEY,
)


class ElasticClientError(Exception):
    """Raised when a request to the cluster fails or returns unusable data."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class ElasticClient(Protocol):
    """Operations the diagnostics services need from a cluster client."""

    def ping(self) -> None: ...

    def cluster_health(self) -> dict[str, Any]: ...

    def cluster_stats(self) -> dict[str, Any]: ...

    def nodes(self) -> dict[str, Any]: ...

    def nodes_info(self) -> dict[str, Any]: ...

    def nodes_stats(self) -> dict[str, Any]: ...

    def indices(self) -> list[dict[str, str]]: ...

    def indices_with_sort(self, sort_by: str, sort_order: str) -> list[dict[str, str]]: ...

    def index_stats(self, index_name: str) -> dict[str, Any]: ...

    def shards(self) -> list[dict[str, str]]: ...

    def shards_with_sort(self, sort_by: str, sort_order: str) -> list[dict[str, str]]: ...

    def lucene_stats(self) -> dict[str, Any]: ...

    def segments(self) -> list[dict[str, str]]: ...

    def termvectors(
        self, index_name: str, document_id: str, fields: Optional[Iterable[str]]
    ) -> dict[str, Any]: ...


def build_sort_param(sort_by: str, sort_order: str) -> str:
    """Build the cat API "s" parameter; ascending order needs no suffix."""
    if sort_order and sort_order != "asc":
        return f"{sort_by}:{sort_order}"
    return sort_by


def _string_field(record: dict[str, Any], key: str) -> str:
    value = record.get(key)
    return value if isinstance(value, str) else constants.EMPTY_STRING


def _alias_map(aliases: list[dict[str, Any]]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in aliases:
        index = _string_field(entry, constants.INDEX_FIELD)
        alias = _string_field(entry, constants.ALIAS_FIELD)
        if not index or not alias:
            continue
        mapping[index] = f"{mapping[index]},{alias}" if index in mapping else alias
    return mapping


def _process_index(record: dict[str, Any], aliases: dict[str, str]) -> dict[str, str]:
    name = _string_field(record, constants.INDEX_FIELD)
    processed = {key: _string_field(record, key) for key in _INDEX_KEYS}
    processed[constants.INDEX_FIELD] = name
    processed[constants.ALIAS_FIELD] = aliases.get(name) or constants.DASH_STRING
    return processed


def _process_shard(record: dict[str, Any]) -> dict[str, str]:
    processed = {key: _string_field(record, key) for key in _SHARD_KEYS}
    node_name = _string_field(record, "node_name")
    if node_name:
        processed["node_name"] = node_name
    return processed


class ElasticsearchClient:
    """Synchronous client for one Elasticsearch host."""

    def __init__(
        self,
        host: str,
        username: str = "",
        password: str = "",
        secure: bool = False,
        timeout: Optional[float] = None,
    ) -> None:
        if not host:
            raise ElasticClientError(
                "Failed to create Elasticsearch client: host is required"
            )
        self.host = host
        self.secure = secure
        auth = httpx.BasicAuth(username, password) if username and password else None
        self._http = httpx.Client(base_url=host, auth=auth, timeout=timeout)

    def __enter__(self) -> "ElasticsearchClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    # --- transport helpers ---

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        body: Any = None,
    ) -> httpx.Response:
        try:
            if body is None:
                return self._http.request(method, path, params=params)
            return self._http.request(method, path, params=params, json=body)
        except httpx.HTTPError as exc:
            raise ElasticClientError(str(exc)) from exc

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as exc:
            raise ElasticClientError(
                f"invalid JSON response: {exc}", response.status_code
            ) from exc

    def _get_object(
        self,
        path: str,
        params: Optional[dict[str, str]] = None,
        method: str = "GET",
        body: Any = None,
    ) -> dict[str, Any]:
        response = self._request(method, path, params, body)
        data = self._json(response)
        if not isinstance(data, dict):
            raise ElasticClientError(
                f"expected a JSON object from {path}", response.status_code
            )
        return data

    def _get_list(
        self, path: str, params: Optional[dict[str, str]] = None
    ) -> list[dict[str, Any]]:
        response = self._request("GET", path, params)
        data = self._json(response)
        if not isinstance(data, list) or not all(isinstance(x, dict) for x in data):
            raise ElasticClientError(
                f"expected a JSON array from {path}", response.status_code
            )
        return data

    def _aliases(self) -> dict[str, str]:
        return _alias_map(self._get_list("/_cat/aliases", {"format": "json"}))

    # --- API ---

    def ping(self) -> None:
        """Check that the host answers; raise ElasticClientError otherwise."""
        response = self._request("HEAD", "/")
        if response.is_error:
            raise ElasticClientError(
                f"{response.status_code} {response.reason_phrase}".strip(),
                response.status_code,
            )

    def cluster_health(self) -> dict[str, Any]:
        return self._get_object("/_cluster/health")

    def cluster_stats(self) -> dict[str, Any]:
        return self._get_object("/_cluster/stats")

    def nodes(self) -> dict[str, Any]:
        return self._get_object("/_nodes")

    def nodes_info(self) -> dict[str, Any]:
        return self._get_object("/_nodes")

    def nodes_stats(self) -> dict[str, Any]:
        return self._get_object("/_nodes/stats")

    def indices(self) -> list[dict[str, str]]:
        """List indices with their aliases joined by commas ("-" when none)."""
        records = self._get_list("/_cat/indices", {"format": "json", "v": "true"})
        aliases = self._aliases()
        return [_process_index(record, aliases) for record in records]

    def indices_with_sort(self, sort_by: str, sort_order: str) -> list[dict[str, str]]:
        """List indices sorted by a cat field; aliases are sorted locally."""
        sort_by_alias = sort_by == constants.ALIAS_FIELD
        sort_param = (
            constants.INDEX_FIELD if sort_by_alias else build_sort_param(sort_by, sort_order)
        )
        records = self._get_list(
            "/_cat/indices", {"format": "json", "s": sort_param, "v": "true"}
        )
        aliases = self._aliases()
        processed = [_process_index(record, aliases) for record in records]
        if sort_by_alias:
            processed.sort(
                key=lambda item: item[constants.ALIAS_FIELD],
                reverse=sort_order == "desc",
            )
        return processed

    def index_stats(self, index_name: str) -> dict[str, Any]:
        return self._get_object(f"/{index_name}/_stats")

    def shards(self) -> list[dict[str, str]]:
        records = self._get_list("/_cat/shards", {"format": "json", "v": "true"})
        return [_process_shard(record) for record in records]

    def shards_with_sort(self, sort_by: str, sort_order: str) -> list[dict[str, str]]:
        records = self._get_list(
            "/_cat/shards",
            {"format": "json", "s": build_sort_param(sort_by, sort_order), "v": "true"},
        )
        return [_process_shard(record) for record in records]

    def lucene_stats(self) -> dict[str, Any]:
        return self._get_object("/_stats")

    def segments(self) -> list[dict[str, str]]:
        """List segments as index name and size in bytes."""
        records = self._get_list("/_cat/segments", {"format": "json", "bytes": "b"})
        return [
            {
                constants.INDEX_FIELD: _string_field(record, constants.INDEX_FIELD),
                "size": _string_field(record, "size"),
            }
            for record in records
        ]

    def termvectors(
        self, index_name: str, document_id: str, fields: Optional[Iterable[str]]
    ) -> dict[str, Any]:
        body = {"fields": list(fields) if fields is not None else None}
        return self._get_object(
            f"/{index_name}/_termvectors/{document_id}", method="POST", body=body
        )