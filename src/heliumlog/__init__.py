"""
heliumlog - Pluggable text-formatting logging backend

heliumlog turns log events (severity, message, source location, metadata)
into human-readable lines, optionally colorized and optionally laid out by
a ``(%token)`` format template, and writes them to a configurable sink.

Modules:
    core: Severity model, template parser, date formatting, the
        HeliumLogger backend, sinks, dispatcher, settings and errors
    adapters: structlog and standard library ``logging`` integration
    log: Process-wide convenience functions for application entry points
    cli: Command-line tool for trying templates and severities

Example:
    >>> from heliumlog import HeliumLogger, Severity, log
    >>> log.use(Severity.INFO)
    >>> log.info("heliumlog initialized")
"""

__version__ = "0.1.0"
__author__ = "heliumlog"
__description__ = (
    "Pluggable text-formatting logging backend with template-based "
    "layouts, severity filtering and ANSI colorization."
)

from heliumlog.core.dispatch import Dispatcher
from heliumlog.core.entry import EntryFormatter, LogEntry
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity, TerminalColor
from heliumlog.core.sinks import MemorySink, Sink, StdoutSink, StreamSink
from heliumlog.core.template import FormatTemplate, parse_format

__all__ = [
    "Dispatcher",
    "EntryFormatter",
    "FormatTemplate",
    "HeliumLogger",
    "LogEntry",
    "MemorySink",
    "Severity",
    "Sink",
    "StdoutSink",
    "StreamSink",
    "TerminalColor",
    "parse_format",
]
