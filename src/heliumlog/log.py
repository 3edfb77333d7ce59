"""
Process-wide logging shortcuts.

Module-level functions bound to a single default Dispatcher, for use at an
application's outermost boundary (scripts, ``main`` functions, CLIs).
Library code should receive a Dispatcher or HeliumLogger instead of
reaching for this module.

The default dispatcher starts with no active logger, so every call below is
a no-op until ``use`` or ``use_stream`` is called. Reassigning the active
logger is not synchronized; activate once during startup.

Example:
    >>> from heliumlog import log
    >>> from heliumlog.core.severity import Severity
    >>>
    >>> log.use(Severity.INFO)
    >>> log.info("Server started")
    2026-10-19T08:30:00.123+00:00 [INFO] [app.py:4 <module>] Server started
"""

from typing import Optional, TextIO

from heliumlog.core.dispatch import Dispatcher
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity

default_dispatcher = Dispatcher()


def use(
    threshold: Severity = Severity.VERBOSE,
    logger: Optional[HeliumLogger] = None,
) -> bool:
    """Activate a standard output logger; see Dispatcher.use."""
    return default_dispatcher.use(threshold, logger)


def use_stream(stream: TextIO, threshold: Severity = Severity.VERBOSE) -> HeliumLogger:
    """Activate a logger writing to ``stream``; see Dispatcher.use_stream."""
    return default_dispatcher.use_stream(stream, threshold)


def set_logger(logger: Optional[HeliumLogger]) -> None:
    default_dispatcher.logger = logger


def get_active_logger() -> Optional[HeliumLogger]:
    return default_dispatcher.logger


def is_logging(severity: Severity) -> bool:
    return default_dispatcher.is_logging(severity)


def entry(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.entry(message, function, line, file, stacklevel=2)


def exit(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.exit(message, function, line, file, stacklevel=2)


def trace(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.trace(message, function, line, file, stacklevel=2)


def debug(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.debug(message, function, line, file, stacklevel=2)


def verbose(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.verbose(message, function, line, file, stacklevel=2)


def info(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.info(message, function, line, file, stacklevel=2)


def notice(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.notice(message, function, line, file, stacklevel=2)


def warning(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.warning(message, function, line, file, stacklevel=2)


def error(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.error(message, function, line, file, stacklevel=2)


def critical(message: str, function=None, line=None, file=None) -> None:
    default_dispatcher.critical(message, function, line, file, stacklevel=2)
