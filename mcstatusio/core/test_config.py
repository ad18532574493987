import pytest
import yaml

from mcstatusio.core.config import ConfigManager
from mcstatusio.core.config_types import API_BASE
from mcstatusio.core.exceptions import ConfigError

def test_missing_file_uses_defaults(tmp_path):
    config = ConfigManager(str(tmp_path / "absent.yaml"))

    assert config.client.api_base == API_BASE
    assert config.client.timeout == 5.0
    assert config.client.query is True
    assert config.logging.level == "INFO"
    assert config.ui.max_list_items == 20

def test_load_overrides(tmp_path):
    path = tmp_path / "mcstatusio.yaml"
    path.write_text(yaml.dump({
        'client': {'timeout': 2.5, 'query': False, 'timeout_margin': 1.0},
        'ui': {'show_mods': False}
    }))
    config = ConfigManager(str(path))

    assert config.client.timeout == 2.5
    assert config.client.query is False
    assert config.client.timeout_margin == 1.0
    assert config.ui.show_mods is False
    assert config.ui.show_plugins is True

def test_create_default_round_trip(tmp_path):
    path = ConfigManager.create_default(str(tmp_path / "default.yaml"))
    config = ConfigManager(str(path))

    assert config.to_dict()['client']['api_base'] == API_BASE

@pytest.mark.parametrize("raw", [
    {'client': {'timeout': 0}},
    {'client': {'timeout_margin': -1}},
    {'client': {'api_base': 'ftp://example.com'}},
    {'logging': {'level': 'LOUD'}},
    {'ui': {'max_list_items': 0}},
    {'client': {'unknown_key': 1}},
    {'client': 'not a mapping'},
    {'client': {'timeout': 'fast'}},
    {'client': {'query': 'yes'}},
    {'client': {'timeout_margin': True}},
    {'ui': {'max_list_items': 2.5}},
    {'logging': {'file': 42}},
])
def test_invalid_config(tmp_path, raw):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.dump(raw))

    with pytest.raises(ConfigError):
        ConfigManager(str(path))

def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("client: [unterminated")

    with pytest.raises(ConfigError):
        ConfigManager(str(path))

def test_int_timeout_coerced_to_float(tmp_path):
    path = tmp_path / "int.yaml"
    path.write_text(yaml.dump({'client': {'timeout': 3}}))
    config = ConfigManager(str(path))

    assert config.client.timeout == 3.0
    assert isinstance(config.client.timeout, float)
