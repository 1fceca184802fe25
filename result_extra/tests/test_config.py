"""Tests for config.py and logging_config.py."""

from unittest.mock import patch

import structlog

from result_extra import logging_config
from result_extra.config import Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        """Test default values with a clean environment."""
        monkeypatch.delenv("RESULT_EXTRA_LOG_LEVEL", raising=False)
        monkeypatch.delenv("RESULT_EXTRA_JSON_LOGS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_env_override(self, monkeypatch):
        """Test values read from prefixed environment variables."""
        monkeypatch.setenv("RESULT_EXTRA_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RESULT_EXTRA_JSON_LOGS", "true")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True


class TestLogging:
    """Tests for logging setup."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_setup(self):
        logging_config.setup_logging(json_logs=True, log_level="WARNING")
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_setup(self):
        logging_config.setup_logging(json_logs=False, log_level="DEBUG")
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_configure_from_settings(self):
        """Test that Settings values are forwarded to setup_logging."""
        settings = Settings(_env_file=None, log_level="ERROR", json_logs=True)
        with patch.object(logging_config, "setup_logging") as mock_setup:
            logging_config.configure_from_settings(settings)
        mock_setup.assert_called_once_with(json_logs=True, log_level="ERROR")

    def test_get_logger(self):
        logger = logging_config.get_logger("result_extra.test")
        assert hasattr(logger, "info")
