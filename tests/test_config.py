import pytest
import yaml

from escope import constants
from escope.config import (
    AppConfig,
    ConfigStore,
    ConnectionConfig,
    HostNotFoundError,
    default_config_path,
)


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "escope.yaml")


def test_load_missing_file_gives_defaults(store):
    cfg = store.load()
    assert cfg.config.connection_timeout == constants.DEFAULT_CONFIG_TIMEOUT
    assert cfg.hosts == {}
    assert cfg.active_host == ""


def test_first_saved_host_becomes_active(store):
    store.save_host("first", ConnectionConfig(host="http://localhost:9200"))
    store.save_host("second", ConnectionConfig(host="http://localhost:9201"))
    assert store.get_active_host() == "first"
    assert store.list_hosts() == ["first", "second"]


def test_host_round_trip(store):
    password = "password"
    conn = ConnectionConfig(
        host="https://es.example.com", username="elastic", password=password, secure=True
    )
    store.save_host("prod", conn)
    assert store.load_host("prod") == conn


def test_load_host_missing_raises(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    with pytest.raises(HostNotFoundError) as info:
        store.load_host("b")
    assert info.value.alias == "b"


def test_load_host_without_file_raises(store):
    with pytest.raises(HostNotFoundError):
        store.load_host("anything")


def test_delete_active_host_clears_active(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    store.save_host("b", ConnectionConfig(host="http://localhost:9201"))
    store.delete_host("a")
    assert store.list_hosts() == ["b"]
    assert store.get_active_host() == ""


def test_delete_missing_host_raises(store):
    with pytest.raises(HostNotFoundError):
        store.delete_host("ghost")


def test_set_active_host(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    store.save_host("b", ConnectionConfig(host="http://localhost:9201"))
    store.set_active_host("b")
    assert store.get_active_host() == "b"


def test_set_active_host_unknown_raises(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    with pytest.raises(HostNotFoundError):
        store.set_active_host("zzz")
    assert store.get_active_host() == "a"


def test_clear_active_host_omits_key_in_file(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    store.clear_active_host()
    raw = yaml.safe_load(store.path.read_text())
    assert "active_host" not in raw
    assert raw["hosts"]["a"]["host"] == "http://localhost:9200"


def test_file_layout(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    raw = yaml.safe_load(store.path.read_text())
    assert raw["active_host"] == "a"
    assert raw["config"]["connection_timeout"] == constants.DEFAULT_CONFIG_TIMEOUT
    assert raw["hosts"]["a"]["secure"] is False


def test_zero_timeout_in_file_uses_fallback(store):
    store.path.write_text("hosts: {}\n")
    assert store.connection_timeout() == constants.DEFAULT_CONFIG_TIMEOUT_2
    assert store.app_config() == AppConfig(
        connection_timeout=constants.DEFAULT_CONFIG_TIMEOUT_2
    )


def test_set_connection_timeout_round_trip(store):
    store.set_connection_timeout(12)
    assert store.connection_timeout() == 12


def test_empty_file_is_an_error(store):
    store.path.write_text("")
    with pytest.raises(ValueError):
        store.load()


def test_save_host_recovers_from_bad_file(store):
    store.path.write_text("")
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    assert store.get_active_host() == "a"
    assert store.load_host("a").host == "http://localhost:9200"


def test_default_config_path_in_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert default_config_path() == tmp_path / constants.CONFIG_FILE_PATH