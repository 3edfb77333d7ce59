"""
Adapters binding heliumlog into third-party logging front ends.

Modules:
    structlog_handler: HeliumLogHandler and ``configure_structlog``
    stdlib_handler: HeliumLoggingHandler for the ``logging`` module
"""

from heliumlog.adapters.stdlib_handler import HeliumLoggingHandler
from heliumlog.adapters.structlog_handler import (
    HeliumLogHandler,
    configure_structlog,
    make_handler,
)

__all__ = [
    "HeliumLogHandler",
    "HeliumLoggingHandler",
    "configure_structlog",
    "make_handler",
]
