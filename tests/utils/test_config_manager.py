import json

import pytest

from cwctl.models.connection import Connection
from cwctl.services.exceptions import ConfigError, ConnectionNotFoundError
from cwctl.utils.config_manager import ConfigManager, default_config_dir


class TestConfigManager:
    """Tests for connection configuration."""

    def test_default_config_dir_from_env(self, isolated_config):
        assert default_config_dir() == isolated_config

    def test_default_config_dir_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("CWCTL_CONFIG_DIR")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_config_dir() == tmp_path / ".codewind" / "config"

    def test_local_connection_without_file(self, tmp_path):
        manager = ConfigManager(tmp_path)
        connection = manager.get_connection("local")
        assert connection.url == "http://localhost:10000"
        assert connection.label == "Codewind local connection"

    def test_local_connection_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CWCTL_LOCAL_URL", "http://127.0.0.1:9090")
        manager = ConfigManager(tmp_path)
        assert manager.get_connection("local").url == "http://127.0.0.1:9090"

    def test_connections_from_file(self, tmp_path):
        (tmp_path / "connections.json").write_text(json.dumps({
            "schemaversion": 1,
            "connections": [
                {"id": "remote1", "label": "Remote", "url": "https://cw.example.com", "access_token": "t"},
                {"id": "local", "label": "Local", "url": "http://localhost:12345"},
            ],
        }))
        manager = ConfigManager(tmp_path)

        connections = manager.list_connections()

        assert [c.id for c in connections] == ["local", "remote1"]
        assert manager.get_connection("local").url == "http://localhost:12345"
        assert manager.get_connection("remote1").access_token == "t"

    def test_unknown_fields_are_kept_on_save(self, tmp_path):
        (tmp_path / "connections.json").write_text(json.dumps({
            "schemaversion": 1,
            "connections": [
                {"id": "remote1", "url": "https://cw.example.com", "auth": "https://auth.example.com"},
            ],
        }))
        manager = ConfigManager(tmp_path)

        manager.add_connection(Connection(id="remote2", url="https://cw2.example.com"))

        saved = json.loads((tmp_path / "connections.json").read_text())
        assert saved["connections"][0]["auth"] == "https://auth.example.com"
        assert [c["id"] for c in saved["connections"]] == ["remote1", "remote2"]

    def test_unknown_connection(self, tmp_path):
        with pytest.raises(ConnectionNotFoundError, match="Connection 'nope' not found"):
            ConfigManager(tmp_path).get_connection("nope")

    def test_invalid_file(self, tmp_path):
        (tmp_path / "connections.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid connections file"):
            ConfigManager(tmp_path).list_connections()

    def test_add_and_remove_connection(self, tmp_path):
        config_dir = tmp_path / "config"
        manager = ConfigManager(config_dir)

        manager.add_connection(Connection(id="remote1", label="Remote", url="https://cw.example.com"))
        assert manager.get_connection("remote1").url == "https://cw.example.com"

        manager.add_connection(Connection(id="remote1", label="Remote", url="https://cw2.example.com"))
        assert [c.id for c in manager.list_connections()] == ["local", "remote1"]
        assert manager.get_connection("remote1").url == "https://cw2.example.com"

        manager.remove_connection("remote1")
        assert [c.id for c in manager.list_connections()] == ["local"]

    def test_remove_local_connection(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot be removed"):
            ConfigManager(tmp_path).remove_connection("local")

    def test_remove_unknown_connection(self, tmp_path):
        with pytest.raises(ConnectionNotFoundError):
            ConfigManager(tmp_path).remove_connection("nope")
