"""
Pytest configuration and fixtures for heliumlog tests
"""

import logging
from datetime import datetime, timezone

import pytest
import structlog

from heliumlog import log
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity
from heliumlog.core.sinks import MemorySink


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore structlog, root logging and the default dispatcher after each test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    log.set_logger(None)


@pytest.fixture
def memory_sink() -> MemorySink:
    """Sink collecting rendered lines"""
    return MemorySink()


@pytest.fixture
def helium_logger(memory_sink: MemorySink) -> HeliumLogger:
    """Logger writing to memory, logging every severity, UTC dates"""
    return HeliumLogger(Severity.ENTRY, memory_sink, time_zone="UTC")


@pytest.fixture
def moment() -> datetime:
    """Fixed instant for deterministic date rendering"""
    return datetime(2026, 10, 19, 8, 30, 15, 123456, tzinfo=timezone.utc)
