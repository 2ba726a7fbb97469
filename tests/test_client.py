import base64
import json

import httpx
import pytest
import respx

from escope.client import ElasticClientError, ElasticsearchClient, build_sort_param

BASE = "http://es.test:9200"


@pytest.fixture
def router():
    with respx.mock(base_url=BASE, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def client():
    with ElasticsearchClient(BASE) as es:
        yield es


def test_build_sort_param_desc_adds_suffix():
    assert build_sort_param("store.size", "desc") == "store.size:desc"


def test_build_sort_param_asc_and_empty_are_plain():
    assert build_sort_param("index", "asc") == "index"
    assert build_sort_param("index", "") == "index"


def test_build_sort_param_other_order_is_appended():
    assert build_sort_param("docs.count", "weird") == "docs.count:weird"


def test_empty_host_is_rejected():
    with pytest.raises(ElasticClientError):
        ElasticsearchClient("")


def test_basic_auth_sent_when_both_credentials_given(router):
    route = router.head("/").mock(return_value=httpx.Response(200))
    password = "password"
    with ElasticsearchClient(BASE, username="user", password=password, secure=True) as es:
        es.ping()
        assert es.host == BASE
    header = route.calls.last.request.headers["authorization"]
    assert header.startswith("Basic ")
    decoded = base64.b64decode(header.split(" ", 1)[1]).decode()
    assert decoded == "user:password"


def test_no_auth_when_password_missing(router):
    route = router.head("/").mock(return_value=httpx.Response(200))
    with ElasticsearchClient(BASE, username="user") as es:
        es.ping()
        assert es.host == BASE
    assert route.call_count == 1
    assert "authorization" not in route.calls.last.request.headers


def test_ping_error_status_raises(router, client):
    router.head("/").mock(return_value=httpx.Response(401))
    with pytest.raises(ElasticClientError) as info:
        client.ping()
    assert info.value.status == 401


def test_ping_transport_error_raises(router, client):
    router.head("/").mock(side_effect=httpx.ConnectError("refused"))
    with pytest.raises(ElasticClientError):
        client.ping()


def test_cluster_health_returns_body(router, client):
    body = {"cluster_name": "demo", "status": "green", "number_of_nodes": 3}
    router.get("/_cluster/health").mock(return_value=httpx.Response(200, json=body))
    assert client.cluster_health() == body


def test_nodes_stats_and_index_stats_paths(router, client):
    router.get("/_nodes/stats").mock(return_value=httpx.Response(200, json={"nodes": {}}))
    router.get("/logs/_stats").mock(return_value=httpx.Response(200, json={"_all": {}}))
    assert client.nodes_stats() == {"nodes": {}}
    assert client.index_stats("logs") == {"_all": {}}


def test_indices_merges_aliases(router, client):
    router.get("/_cat/indices").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"index": "logs", "health": "green", "status": "open", "pri": "1",
                 "rep": "0", "docs.count": "10", "store.size": "1kb", "uuid": "u1"},
                {"index": "orders", "health": "yellow", "status": "open"},
            ],
        )
    )
    router.get("/_cat/aliases").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"index": "logs", "alias": "a1"},
                {"index": "logs", "alias": "a2"},
                {"index": "", "alias": "ignored"},
            ],
        )
    )
    result = client.indices()
    assert result[0]["alias"] == "a1,a2"
    assert result[0]["docs.count"] == "10"
    assert "uuid" not in result[0]
    assert result[1]["alias"] == "-"
    assert result[1]["pri"] == ""


def test_indices_with_sort_passes_sort_param(router, client):
    route = router.get("/_cat/indices").mock(return_value=httpx.Response(200, json=[]))
    router.get("/_cat/aliases").mock(return_value=httpx.Response(200, json=[]))
    assert client.indices_with_sort("store.size", "desc") == []
    assert route.calls.last.request.url.params["s"] == "store.size:desc"


@pytest.mark.parametrize("order", ["asc", "desc"])
def test_indices_with_sort_by_alias_sorts_locally(router, client, order):
    route = router.get("/_cat/indices").mock(
        return_value=httpx.Response(
            200, json=[{"index": "i1"}, {"index": "i2"}, {"index": "i3"}]
        )
    )
    router.get("/_cat/aliases").mock(
        return_value=httpx.Response(
            200,
            json=[{"index": "i1", "alias": "m"}, {"index": "i2", "alias": "b"},
                  {"index": "i3", "alias": "z"}],
        )
    )
    result = client.indices_with_sort("alias", order)
    aliases = [item["alias"] for item in result]
    assert aliases == sorted(aliases, reverse=order == "desc")
    assert route.calls.last.request.url.params["s"] == "index"


def test_shards_keeps_node_name_only_when_present(router, client):
    router.get("/_cat/shards").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"index": "logs", "shard": "0", "prirep": "p", "state": "STARTED",
                 "ip": "10.0.0.1", "node": "n1", "node_name": "node-one"},
                {"index": "logs", "shard": "0", "prirep": "r", "state": "UNASSIGNED",
                 "ip": None, "node": None},
            ],
        )
    )
    first, second = client.shards()
    assert first["node_name"] == "node-one"
    assert first["ip"] == "10.0.0.1"
    assert "node_name" not in second
    assert second["ip"] == ""


def test_shards_with_sort_asc_param(router, client):
    route = router.get("/_cat/shards").mock(return_value=httpx.Response(200, json=[]))
    assert client.shards_with_sort("store", "asc") == []
    assert route.calls.last.request.url.params["s"] == "store"


def test_segments_maps_index_and_size(router, client):
    route = router.get("/_cat/segments").mock(
        return_value=httpx.Response(
            200, json=[{"index": "logs", "size": "2048", "segment": "_0"}]
        )
    )
    assert client.segments() == [{"index": "logs", "size": "2048"}]
    assert route.calls.last.request.url.params["bytes"] == "b"


def test_termvectors_posts_fields(router, client):
    route = router.post("/logs/_termvectors/42").mock(
        return_value=httpx.Response(200, json={"found": True})
    )
    assert client.termvectors("logs", "42", ["title", "body"]) == {"found": True}
    sent = json.loads(route.calls.last.request.content)
    assert sent == {"fields": ["title", "body"]}


def test_cat_endpoint_with_object_body_raises(router, client):
    router.get("/_cat/shards").mock(
        return_value=httpx.Response(500, json={"error": "boom"})
    )
    with pytest.raises(ElasticClientError) as info:
        client.shards()
    assert info.value.status == 500


def test_invalid_json_raises(router, client):
    router.get("/_cluster/stats").mock(return_value=httpx.Response(200, text="not json"))
    with pytest.raises(ElasticClientError):
        client.cluster_stats()