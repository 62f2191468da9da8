"""Tests for Config Pydantic Settings."""

import logging

import pytest
from pydantic import ValidationError

from tripproxy.config import DEFAULT_UPSTREAM_URL, Config, LoggingConfig, RetryConfig, configure_logging


class TestConfigDefaults:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TRIPPROXY_CONFIG_FILE", raising=False)
        config = Config()
        assert config.server.port == 3000
        assert config.upstream.url == DEFAULT_UPSTREAM_URL
        assert config.upstream.data_field == "data"
        assert config.upstream.timeout == 30.0
        assert config.retry.attempts == 1

    def test_env_prefix(self) -> None:
        assert Config.model_config.get("env_prefix") == "TRIPPROXY_"


class TestConfigSources:
    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRIPPROXY_UPSTREAM__URL", "https://mirror.example.com/trips")
        monkeypatch.setenv("TRIPPROXY_SERVER__PORT", "8080")
        monkeypatch.setenv("TRIPPROXY_RETRY__ATTEMPTS", "4")

        config = Config()

        assert config.upstream.url == "https://mirror.example.com/trips"
        assert config.server.port == 8080
        assert config.retry.attempts == 4

    def test_yaml_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "tripproxy.yaml"
        config_file.write_text("upstream:\n  url: https://yaml.example.com/trips\n  timeout: null\n")
        monkeypatch.setenv("TRIPPROXY_CONFIG_FILE", str(config_file))
        monkeypatch.delenv("TRIPPROXY_UPSTREAM__URL", raising=False)

        config = Config()

        assert config.upstream.url == "https://yaml.example.com/trips"
        assert config.upstream.timeout is None

    def test_env_beats_yaml(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "tripproxy.yaml"
        config_file.write_text("server:\n  port: 4000\n")
        monkeypatch.setenv("TRIPPROXY_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("TRIPPROXY_SERVER__PORT", "5000")

        assert Config().server.port == 5000

    def test_missing_yaml_file_is_ignored(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRIPPROXY_CONFIG_FILE", str(tmp_path / "absent.yaml"))
        assert Config().server.port == 3000


class TestRetryConfig:
    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(attempts=0)

    def test_rejects_inverted_wait_bounds(self) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(wait_min=5, wait_max=1)


class TestConfigureLogging:
    def test_installs_single_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TRIPPROXY_LOG_FILE", raising=False)
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            configure_logging(LoggingConfig(level="WARNING"))
            configure_logging(LoggingConfig(level="WARNING"))

            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])

    def test_log_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        log_file = tmp_path / "logs" / "proxy.log"
        monkeypatch.setenv("TRIPPROXY_LOG_FILE", str(log_file))
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            configure_logging(LoggingConfig(level="INFO"))
            logging.getLogger("tripproxy.test").info("hello")
            for handler in root.handlers:
                handler.flush()

            assert "hello" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
