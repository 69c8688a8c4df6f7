"""Tests for configuration loading."""

import pytest

from waxpeer.config.settings import WaxpeerConfig, config_from_dict, load_config


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "credentials:\n"
        "  api_key: ${TEST_WAXPEER_KEY}\n"
        "  steam_id: ${TEST_WAXPEER_STEAM_ID:76561198000000000}\n"
        "  website_events: [add_item, remove]\n"
        "trade_socket:\n"
        "  heartbeat_interval_seconds: 10\n"
        "logging:\n"
        "  format: json\n"
    )
    return path


class TestLoadConfig:

    def test_env_substitution_and_defaults(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_WAXPEER_KEY", "secret")
        monkeypatch.delenv("TEST_WAXPEER_STEAM_ID", raising=False)

        config = load_config(str(config_file))

        assert config.credentials.api_key == "secret"
        assert config.credentials.steam_id == "76561198000000000"
        assert config.credentials.website_events == ["add_item", "remove"]
        assert config.trade_socket.heartbeat_interval_seconds == 10
        assert config.trade_socket.url == "wss://wssex.waxpeer.com"
        assert config.logging.format == "json"
        assert config.api.prices_rate_limit == 60

    def test_env_overrides_default(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_WAXPEER_KEY", "secret")
        monkeypatch.setenv("TEST_WAXPEER_STEAM_ID", "1")

        assert load_config(str(config_file)).credentials.steam_id == "1"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(str(path)) == WaxpeerConfig()

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            config_from_dict({'api': {'no_such_option': 1}})


class TestDefaults:

    def test_protocol_constants(self):
        config = WaxpeerConfig()

        assert config.trade_socket.heartbeat_interval_seconds == 25.0
        assert config.trade_socket.reconnect_step_seconds == 1.0
        assert config.trade_socket.reset_backoff_on_open is False
        assert config.api.prices_dopplers_rate_limit == 60
        assert config.api.rate_limit_window_seconds == 60.0
        assert config.website_socket.transports == ["websocket"]
