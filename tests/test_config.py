import pytest
from pydantic import ValidationError

from students_api.core.config import HTTPServerSettings, load_settings
from students_api.core.exceptions import ConfigError

CONFIG = """\
env: "dev"
storage_path: "storage.db"
http_server:
  addr: "localhost:8082"
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "local.yaml"
    path.write_text(CONFIG)
    return path


def test_load_from_flag(config_file):
    settings = load_settings(["--config", str(config_file)])
    assert settings.env == "dev"
    assert settings.storage_path == "storage.db"
    assert settings.http_server.addr == "localhost:8082"
    assert settings.http_server.shutdown_timeout == 5.0


def test_env_variable_wins_over_flag(config_file, tmp_path, monkeypatch):
    other = tmp_path / "other.yaml"
    other.write_text(CONFIG.replace("storage.db", "other.db"))
    monkeypatch.setenv("CONFIG_PATH", str(other))

    settings = load_settings(["--config", str(config_file)])
    assert settings.storage_path == "other.db"


def test_env_overrides_file_value(config_file, monkeypatch):
    monkeypatch.setenv("ENV", "production")
    assert load_settings(["--config", str(config_file)]).env == "production"


def test_env_defaults_to_production(tmp_path):
    path = tmp_path / "minimal.yaml"
    path.write_text('storage_path: "s.db"\nhttp_server:\n  addr: ":8080"\n')
    assert load_settings(["--config", str(path)]).env == "production"


def test_settings_are_frozen(config_file):
    settings = load_settings(["--config", str(config_file)])
    with pytest.raises(ValidationError):
        settings.env = "local"


def test_missing_config_path():
    with pytest.raises(ConfigError, match="config path is not set"):
        load_settings([])


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="config file does not exist"):
        load_settings(["--config", str(tmp_path / "nope.yaml")])


@pytest.mark.parametrize(
    "content",
    [
        "http_server: [unclosed",
        "- just\n- a list\n",
        'env: "dev"\nhttp_server:\n  addr: "localhost:8082"\n',
        'storage_path: "s.db"\nhttp_server:\n  addr: "localhost"\n',
    ],
)
def test_unreadable_config(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError, match="can not read config file"):
        load_settings(["--config", str(path)])


@pytest.mark.parametrize(
    "addr, host, port",
    [
        ("localhost:8082", "localhost", 8082),
        (":8080", "0.0.0.0", 8080),
        ("[::1]:9000", "::1", 9000),
    ],
)
def test_listen_address(addr, host, port):
    http_server = HTTPServerSettings(addr=addr)
    assert http_server.host == host
    assert http_server.port == port
