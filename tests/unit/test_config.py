"""Unit tests for settings."""
from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from value_cleaner.config import CleanerSettings, configure_logging, get_settings


class TestCleanerSettings:
    def test_defaults(self):
        settings = CleanerSettings()
        assert settings.log_level == "warning"
        assert settings.log_json is False
        assert settings.log_file is None
        assert settings.trace_dispatch is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("VALUE_CLEANER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("VALUE_CLEANER_LOG_JSON", "1")
        monkeypatch.setenv("VALUE_CLEANER_TRACE_DISPATCH", "true")
        settings = CleanerSettings()
        assert settings.log_level == "debug"
        assert settings.log_json is True
        assert settings.trace_dispatch is True

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError, match="log_level"):
            CleanerSettings(log_level="loud")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_applies_level_to_package_logger_only(self, reset_structlog):
        root_level = logging.getLogger().level
        configure_logging(CleanerSettings(log_level="error"))
        assert logging.getLogger("value_cleaner").level == logging.ERROR
        assert logging.getLogger().level == root_level
