"""
Standard library ``logging`` integration for heliumlog.

HeliumLoggingHandler is a ``logging.Handler`` that renders LogRecords with a
HeliumLogger, so existing ``logging.getLogger(...)`` calls pick up
heliumlog templates, dates and colors.

Level mapping:
    CRITICAL -> CRITICAL, ERROR -> ERROR, WARNING -> WARNING,
    INFO -> INFO, DEBUG -> DEBUG, anything lower -> TRACE

Example:
    >>> import logging
    >>> from heliumlog.adapters.stdlib_handler import HeliumLoggingHandler
    >>>
    >>> logging.getLogger().addHandler(HeliumLoggingHandler())
    >>> logging.getLogger("app").warning("Cache miss for %s", "user:42")
"""

import logging
from datetime import datetime
from typing import Optional

from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity

_exception_formatter = logging.Formatter()


def severity_for(levelno: int) -> Severity:
    """Map a stdlib numeric level to the closest Severity."""
    if levelno >= logging.CRITICAL:
        return Severity.CRITICAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    if levelno >= logging.DEBUG:
        return Severity.DEBUG
    return Severity.TRACE


class HeliumLoggingHandler(logging.Handler):
    """
    logging.Handler that formats and writes through a HeliumLogger.

    Records are filtered twice: by this handler's stdlib level and by the
    HeliumLogger threshold. The record's logger name is passed as the label.

    Attributes:
        helium_logger (HeliumLogger): Backend logger
    """

    def __init__(
        self, logger: Optional[HeliumLogger] = None, level: int = logging.NOTSET
    ) -> None:
        super().__init__(level)
        self.helium_logger = logger or HeliumLogger()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            severity = severity_for(record.levelno)
            if not self.helium_logger.is_logging(severity):
                return

            message = record.getMessage()
            if record.exc_info:
                message = (
                    f"{message}\n{_exception_formatter.formatException(record.exc_info)}"
                )

            text = self.helium_logger.format_entry(
                severity,
                message,
                record.funcName or "",
                record.lineno,
                record.pathname,
                label=record.name,
                timestamp=datetime.fromtimestamp(record.created),
            )
            self.helium_logger.write(text)
        except Exception:
            self.handleError(record)
