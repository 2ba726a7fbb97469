# escope

Connection management and a REST client for Elasticsearch clusters, with a
command that checks whether a cluster answers.

## Installation

```
pip install .
```

Install the test dependencies with:

```
pip install ".[test]"
```

## Checking a connection

Run `escope` with the address of a cluster to check that it answers:

```
escope --host http://localhost:9200
```

For a cluster that requires authentication, pass credentials and `--secure`:

```
escope --host https://localhost:9200 --username elastic --password password --secure
```

Credentials are sent as HTTP basic authentication whenever both a username
and a password are given. Short forms are available: `-H` for `--host`,
`-u` for `--username`, `-p` for `--password` and `-a` for `--alias`.

On success the command prints `Connection successful.` and exits with
status 0; otherwise it prints the reason and exits with status 1.

### Saved hosts

Connection details can be stored under an alias in `~/.escope.yaml`.
Select a saved host with `--alias`:

```
escope --alias local
```

When neither `--host` nor `--alias` is given, escope uses the active host
from the configuration file. If no host is configured, no active host is
set, or the alias is unknown, it prints the saved aliases and how to set one
up.

## Managing the configuration from Python

`escope.config.ConfigStore` reads and writes the configuration file (by
default `default_config_path()`, i.e. `~/.escope.yaml`). The first host saved
becomes the active host; deleting the active host clears it.

```python
from escope.config import ConfigStore, ConnectionConfig, default_config_path

store = ConfigStore(default_config_path())

password = "password"
store.save_host(
    "production",
    ConnectionConfig(
        host="https://localhost:9200",
        username="elastic",
        password=password,
        secure=True,
    ),
)

print(store.list_hosts())          # aliases, sorted
store.set_active_host("production")
print(store.get_active_host())

store.set_connection_timeout(10)
print(store.connection_timeout())
```

Looking up, deleting or activating an alias that is not saved raises
`HostNotFoundError`. When the file does not exist the connection timeout is
3 seconds; a file without a timeout gives 30 seconds. A file that cannot be
parsed raises `ValueError`.

## Talking to a cluster

`escope.connection.ConnectionManager` tracks which settings are in use and
builds a client lazily from them (falling back to the first saved alias when
none are set). `test_connection(config, timeout_seconds)` pings a host once
and raises if it cannot be reached.

`escope.client.ElasticsearchClient` can also be used on its own as a
context manager:

```python
from escope.client import ElasticsearchClient, ElasticClientError

password = "password"
with ElasticsearchClient("http://localhost:9200", "elastic", password, True, 5) as client:
    try:
        client.ping()
        health = client.cluster_health()
        print(health["status"])
    except ElasticClientError as exc:
        print(f"Request failed: {exc}")
```

The client offers `cluster_health`, `cluster_stats`, `nodes`, `nodes_info`,
`nodes_stats`, `indices` (with aliases attached, `-` when there are none),
`index_stats`, `shards`, `segments`, `lucene_stats` and `termvectors`.
`indices_with_sort` and `shards_with_sort` take a field and a direction
(`asc` or `desc`); sorting indices by `alias` is done locally.
`build_sort_param` builds the sort parameter they send.

## Helpers

`escope.models` holds the data classes used throughout, along with
`format_bytes` and `parse_size` for human-readable sizes:

```python
from escope.models import format_bytes, parse_size

print(format_bytes(1536))  # 1.5kb
print(parse_size("2kb"))   # 2048
```

`escope.constants` holds field names, thresholds and message texts.

## What this package does not do

The `escope` command only resolves a connection and pings the cluster. It
has no subcommands: there are no commands that print cluster, node, index,
shard, segment, GC or term-vector reports, and no commands for editing the
saved hosts. Use `ConfigStore` from Python to manage the configuration file,
and `ElasticsearchClient` to fetch the raw data such reports would be built
from.