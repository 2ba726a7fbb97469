import httpx
import pytest
import respx
import yaml

from escope import constants
from escope.cli import ConfigurationError, build_parser, main, validate_config
from escope.config import ConfigStore, ConnectionConfig
from escope.connection import ConnectionManager


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "escope.yaml")


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_parser_reads_flags():
    password = "password"
    args = build_parser().parse_args(
        ["-H", "http://localhost:9200", "-u", "elastic", "-p", password, "--secure", "-a", "x"]
    )
    assert args.host == "http://localhost:9200"
    assert args.username == "elastic"
    assert args.password == password
    assert args.secure is True
    assert args.alias == "x"


def test_host_flag_sets_config(store):
    manager = ConnectionManager(store)
    validate_config(manager, build_parser().parse_args(["--host", "http://localhost:9200"]))
    assert manager.config == ConnectionConfig(host="http://localhost:9200")


def test_alias_flag_uses_saved_host(store):
    store.save_host("local", ConnectionConfig(host="http://localhost:9200"))
    manager = ConnectionManager(store)
    validate_config(manager, build_parser().parse_args(["--alias", "local"]))
    assert manager.config.host == "http://localhost:9200"


def test_unknown_alias_lists_available(store):
    store.save_host("local", ConnectionConfig(host="http://localhost:9200"))
    manager = ConnectionManager(store)
    with pytest.raises(ConfigurationError) as info:
        validate_config(manager, build_parser().parse_args(["-a", "ghost"]))
    assert str(info.value) == "host alias 'ghost' not found"
    assert "  - local" in info.value.details


def test_no_configuration(store):
    manager = ConnectionManager(store)
    with pytest.raises(ConfigurationError) as info:
        validate_config(manager, build_parser().parse_args([]))
    assert str(info.value) == "no configuration found"
    assert info.value.details[0] == constants.ERR_NO_CONFIGURATION_FOUND


def test_no_active_host(store):
    store.save_host("local", ConnectionConfig(host="http://localhost:9200"))
    store.clear_active_host()
    manager = ConnectionManager(store)
    with pytest.raises(ConfigurationError) as info:
        validate_config(manager, build_parser().parse_args([]))
    assert str(info.value) == "no active host set"
    assert "  - local" in info.value.details


def test_active_host_missing_from_hosts(store):
    store.path.write_text(
        yaml.safe_dump({"hosts": {"local": {"host": "http://localhost:9200"}},
                        "active_host": "ghost"})
    )
    manager = ConnectionManager(store)
    with pytest.raises(ConfigurationError) as info:
        validate_config(manager, build_parser().parse_args([]))
    assert str(info.value) == "active host 'ghost' not found"


def test_active_host_is_used(store):
    store.save_host("a", ConnectionConfig(host="http://localhost:9200"))
    store.save_host("b", ConnectionConfig(host="http://localhost:9201"))
    store.set_active_host("b")
    manager = ConnectionManager(store)
    validate_config(manager, build_parser().parse_args([]))
    assert manager.config.host == "http://localhost:9201"


def test_main_without_configuration(home, capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert constants.ERR_NO_CONFIGURATION_FOUND in out


def test_main_successful_ping(home, capsys):
    with respx.mock(base_url="http://es.test") as router:
        router.head("/").mock(return_value=httpx.Response(200))
        assert main(["--host", "http://es.test"]) == 0
    assert capsys.readouterr().out.strip() == constants.MSG_CONNECTION_SUCCESSFUL


def test_main_error_status(home, capsys):
    with respx.mock(base_url="http://es.test") as router:
        router.head("/").mock(return_value=httpx.Response(401))
        assert main(["--host", "http://es.test"]) == 1
    assert capsys.readouterr().out.strip() == "Connection failed: 401 Unauthorized"


def test_main_transport_error(home, capsys):
    with respx.mock(base_url="http://es.test") as router:
        router.head("/").mock(side_effect=httpx.ConnectError("refused"))
        assert main(["--host", "http://es.test"]) == 1
    assert capsys.readouterr().out.strip() == "Connection failed: refused"