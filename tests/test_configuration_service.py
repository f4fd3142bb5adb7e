"""
Tests for configuration loading.
"""

import json

import pytest

from userledger.exceptions import ConfigurationError
from userledger.services import ConfigurationService, LedgerConfig, StoreConfig, create_store


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove userledger environment overrides."""
    for key in ("USERLEDGER_STORE_STORE_PATH", "USERLEDGER_STORE_ENCODING", "USERLEDGER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


class TestLedgerConfig:
    """Test configuration dataclasses."""

    def test_defaults(self):
        config = LedgerConfig()

        assert config.store.store_path == "users.txt"
        assert config.store.encoding == "utf-8"
        assert config.log_level == "WARNING"

    def test_log_level_is_normalized(self):
        assert LedgerConfig(log_level="debug").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ConfigurationError):
            LedgerConfig(log_level="LOUD")

    def test_rejects_empty_store_path(self):
        with pytest.raises(ConfigurationError):
            LedgerConfig(store=StoreConfig(store_path=" "))


class TestConfigurationService:
    """Test ConfigurationService."""

    def test_load_without_file(self):
        config = ConfigurationService().load_config()

        assert config.store.store_path == "users.txt"

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "store": {"store_path": "data/people.txt", "unknown": 1},
            "log_level": "info",
        }))

        config = ConfigurationService(str(config_file)).get_config()

        assert config.store.store_path == "data/people.txt"
        assert config.log_level == "INFO"

    def test_invalid_json_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError):
            ConfigurationService(str(config_file)).load_config()

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("USERLEDGER_STORE_STORE_PATH", str(tmp_path / "env.txt"))
        monkeypatch.setenv("USERLEDGER_LOG_LEVEL", "ERROR")

        config = ConfigurationService().load_config()

        assert config.store.store_path == str(tmp_path / "env.txt")
        assert config.log_level == "ERROR"

    def test_get_config_is_cached(self):
        service = ConfigurationService()

        assert service.get_config() is service.get_config()

    def test_save_and_reload(self, tmp_path):
        config_file = tmp_path / "nested" / "config.json"
        service = ConfigurationService(str(config_file))
        config = LedgerConfig(store=StoreConfig(store_path="people.txt"), log_level="DEBUG")

        service.save_config(config)

        assert ConfigurationService(str(config_file)).load_config() == config

    def test_save_without_path_raises(self):
        with pytest.raises(ConfigurationError):
            ConfigurationService().save_config(LedgerConfig())

    def test_create_store(self, tmp_path):
        store = create_store(StoreConfig(store_path=str(tmp_path / "users.txt"), encoding="utf-8"))

        assert store.path == tmp_path / "users.txt"
        assert store.list_all() == []


class TestMalformedConfig:
    """Test configuration files with the wrong shape."""

    @pytest.mark.parametrize("content", ['[]', '"users.txt"', '42', 'null'])
    def test_root_must_be_object(self, tmp_path, content):
        config_file = tmp_path / "config.json"
        config_file.write_text(content)

        with pytest.raises(ConfigurationError):
            ConfigurationService(str(config_file)).load_config()

    @pytest.mark.parametrize("store", ['[]', '"people.txt"', 'null'])
    def test_store_section_must_be_object(self, tmp_path, store):
        config_file = tmp_path / "config.json"
        config_file.write_text(f'{{"store": {store}}}')

        with pytest.raises(ConfigurationError):
            ConfigurationService(str(config_file)).load_config()

    @pytest.mark.parametrize("log_level", ['null', '10', '["INFO"]'])
    def test_log_level_must_be_string(self, tmp_path, log_level):
        config_file = tmp_path / "config.json"
        config_file.write_text(f'{{"log_level": {log_level}}}')

        with pytest.raises(ConfigurationError):
            ConfigurationService(str(config_file)).load_config()

    def test_store_values_must_be_strings(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"store": {"store_path": 5}}')

        with pytest.raises(ConfigurationError):
            ConfigurationService(str(config_file)).load_config()

    def test_unknown_encoding(self):
        with pytest.raises(ConfigurationError):
            LedgerConfig(store=StoreConfig(encoding="no-such-codec"))

    def test_non_utf8_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_bytes(b'{"log_level": "\xff"}')

        with pytest.raises(ConfigurationError):
            ConfigurationService(str(config_file)).load_config()
