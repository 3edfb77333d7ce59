"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from heliumlog.core.config.settings import Settings, get_settings
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity
from heliumlog.core.sinks import MemorySink, StdoutSink


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HELIUMLOG_THRESHOLD",
        "HELIUMLOG_COLORED",
        "HELIUMLOG_DETAILS",
        "HELIUMLOG_FULL_FILE_PATH",
        "HELIUMLOG_FORMAT",
        "HELIUMLOG_DATE_FORMAT",
        "HELIUMLOG_TIME_ZONE",
        "HELIUMLOG_LOG_LEVEL",
        "HELIUMLOG_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Settings defaults and validation"""

    def test_defaults_match_logger_defaults(self):
        settings = Settings()
        assert settings.THRESHOLD == "VERBOSE"
        assert settings.COLORED is False
        assert settings.DETAILS is True
        assert settings.FULL_FILE_PATH is False
        assert settings.FORMAT is None
        assert settings.DATE_FORMAT is None
        assert settings.TIME_ZONE is None
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_FORMAT == "text"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("HELIUMLOG_THRESHOLD", "warn")
        monkeypatch.setenv("HELIUMLOG_COLORED", "true")
        monkeypatch.setenv("HELIUMLOG_FORMAT", "[(%type)] (%msg)")
        monkeypatch.setenv("HELIUMLOG_TIME_ZONE", "Europe/Paris")
        monkeypatch.setenv("HELIUMLOG_LOG_LEVEL", "debug")
        monkeypatch.setenv("HELIUMLOG_LOG_FORMAT", "JSON")

        settings = get_settings()
        assert settings.THRESHOLD == "WARNING"
        assert settings.COLORED is True
        assert settings.FORMAT == "[(%type)] (%msg)"
        assert settings.TIME_ZONE == "Europe/Paris"
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "json"

    def test_invalid_threshold(self, monkeypatch):
        monkeypatch.setenv("HELIUMLOG_THRESHOLD", "loud")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_time_zone(self, monkeypatch):
        monkeypatch.setenv("HELIUMLOG_TIME_ZONE", "Nowhere/Special")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(LOG_FORMAT="xml")


class TestLoggerFromSettings:
    """HeliumLogger.from_settings"""

    def test_defaults(self):
        logger = HeliumLogger.from_settings(Settings())
        assert logger.threshold is Severity.VERBOSE
        assert isinstance(logger.sink, StdoutSink)
        assert logger.format is None

    def test_configured(self, moment):
        settings = Settings(
            THRESHOLD="error",
            DETAILS=False,
            FORMAT="(%date) (%msg)",
            DATE_FORMAT="%H:%M",
            TIME_ZONE="Asia/Tokyo",
        )
        sink = MemorySink()
        logger = HeliumLogger.from_settings(settings, sink)

        assert logger.threshold is Severity.ERROR
        assert logger.details is False
        assert logger.sink is sink
        assert (
            logger.format_entry(Severity.ERROR, "up", "f", 1, "a.py", timestamp=moment)
            == "17:30 up"
        )
