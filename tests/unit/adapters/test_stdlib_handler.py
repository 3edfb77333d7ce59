"""
Tests for the standard library logging handler.
"""

import logging

import pytest

from heliumlog.adapters.stdlib_handler import HeliumLoggingHandler, severity_for
from heliumlog.core.severity import Severity


@pytest.fixture
def stdlib_logger(helium_logger):
    helium_logger.format = "(%label) [(%type)] (%file):(%func) (%msg)"
    handler = HeliumLoggingHandler(helium_logger)
    logger = logging.getLogger("heliumlog.tests.stdlib")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield logger
    logger.removeHandler(handler)
    logger.propagate = True


@pytest.mark.parametrize(
    "levelno,severity",
    [
        (logging.CRITICAL, Severity.CRITICAL),
        (logging.ERROR, Severity.ERROR),
        (logging.WARNING, Severity.WARNING),
        (logging.INFO, Severity.INFO),
        (logging.DEBUG, Severity.DEBUG),
        (5, Severity.TRACE),
        (25, Severity.INFO),
    ],
)
def test_severity_for(levelno, severity):
    assert severity_for(levelno) is severity


class TestHeliumLoggingHandler:
    """HeliumLoggingHandler"""

    def test_record_is_rendered(self, stdlib_logger, memory_sink):
        stdlib_logger.warning("cache miss for %s", "user:42")
        assert memory_sink.lines == [
            "heliumlog.tests.stdlib [WARNING] test_stdlib_handler.py:"
            "test_record_is_rendered cache miss for user:42"
        ]

    def test_threshold_applies(self, stdlib_logger, helium_logger, memory_sink):
        helium_logger.threshold = Severity.ERROR
        stdlib_logger.info("hidden")
        stdlib_logger.error("shown")
        assert len(memory_sink.lines) == 1
        assert memory_sink.lines[0].endswith("shown")

    def test_exception_is_appended(self, stdlib_logger, memory_sink):
        try:
            raise RuntimeError("disk on fire")
        except RuntimeError:
            stdlib_logger.exception("write failed")

        first, _, rest = memory_sink.lines[0].partition("\n")
        assert first.endswith("write failed")
        assert "[ERROR]" in first
        assert "RuntimeError: disk on fire" in rest

    def test_default_backend(self):
        handler = HeliumLoggingHandler()
        assert handler.helium_logger.threshold is Severity.VERBOSE
