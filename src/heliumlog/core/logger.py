"""
HeliumLogger: the text-formatting logging backend.

HeliumLogger implements the logger capability consumed by the dispatch
facade and by the adapters:

    log(severity, message, function, line, file, metadata=None)
    is_logging(severity) -> bool

Each call is filtered against the threshold first; events below it are
neither formatted nor written. Accepted events are rendered by
``format_entry`` and handed to the logger's sink.

Configuration is plain attribute assignment. Assigning ``format``
recompiles the template immediately, and assigning ``date_format`` or
``time_zone`` rebuilds the date formatter, so nothing is parsed per call.
Configuration is expected to be done before the logger is shared between
threads; concurrent mutation while logging is not synchronized.

Example:
    >>> from heliumlog.core.logger import HeliumLogger
    >>> from heliumlog.core.severity import Severity
    >>> from heliumlog.core.sinks import MemorySink
    >>>
    >>> sink = MemorySink()
    >>> logger = HeliumLogger(Severity.INFO, sink=sink)
    >>> logger.format = "[(%type)] (%msg)"
    >>> logger.log(Severity.WARNING, "disk almost full", "main", 12, "/srv/app.py")
    >>> sink.lines
    ['[WARNING] disk almost full']
"""

import os
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Union

from heliumlog.core.dates import DateFormatter, TimeZoneLike
from heliumlog.core.entry import (
    CallableFormatter,
    EntryFormatter,
    LogEntry,
    RenderMode,
    colorize,
    prettify_metadata,
    render_default,
    render_template,
)
from heliumlog.core.severity import Severity, is_enabled
from heliumlog.core.sinks import Sink, StdoutSink
from heliumlog.core.template import FormatTemplate, parse_format

if TYPE_CHECKING:
    from heliumlog.adapters.structlog_handler import HeliumLogHandler
    from heliumlog.core.config.settings import Settings

FormatterLike = Union[EntryFormatter, Callable[[LogEntry], str]]


class HeliumLogger:
    """
    Formats log events as text lines and writes them to a sink.

    Attributes:
        threshold (Severity): Lowest severity that is logged
        sink (Sink): Output destination, standard output by default
        colored (bool): Wrap lines in ANSI colors by severity
        details (bool): Use the detailed built-in layout instead of the
            short one when no template or formatter is set
        full_file_path (bool): Keep full source paths instead of basenames
        format (Optional[str]): Template string, compiled on assignment
        formatter (Optional[EntryFormatter]): Custom rendering strategy;
            plain callables are wrapped in CallableFormatter
        date_format (Optional[str]): strftime pattern, None for ISO-8601
        time_zone (Optional[tzinfo]): Zone for dates, None for local time

    Rendering priority is formatter, then template, then the built-in
    layout; see ``render_mode``.
    """

    def __init__(
        self,
        threshold: Severity = Severity.VERBOSE,
        sink: Optional[Sink] = None,
        *,
        colored: bool = False,
        details: bool = True,
        full_file_path: bool = False,
        format: Optional[str] = None,
        formatter: Optional[FormatterLike] = None,
        date_format: Optional[str] = None,
        time_zone: Optional[TimeZoneLike] = None,
    ) -> None:
        self.threshold = threshold
        self.sink: Sink = sink if sink is not None else StdoutSink()
        self.colored = colored
        self.details = details
        self.full_file_path = full_file_path

        self._format: Optional[str] = None
        self._template: Optional[FormatTemplate] = None
        self._formatter: Optional[EntryFormatter] = None
        self._date_format = date_format
        self._time_zone = time_zone
        self._date_formatter = DateFormatter(date_format, time_zone)

        self.format = format
        self.formatter = formatter

    @classmethod
    def from_settings(
        cls, settings: "Settings", sink: Optional[Sink] = None
    ) -> "HeliumLogger":
        """Create a logger configured from a Settings instance."""
        return cls(
            settings.THRESHOLD,
            sink,
            colored=settings.COLORED,
            details=settings.DETAILS,
            full_file_path=settings.FULL_FILE_PATH,
            format=settings.FORMAT,
            date_format=settings.DATE_FORMAT,
            time_zone=settings.TIME_ZONE,
        )

    # Configuration

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @threshold.setter
    def threshold(self, value: Severity) -> None:
        self._threshold = Severity.parse(value)

    @property
    def format(self) -> Optional[str]:
        return self._format

    @format.setter
    def format(self, value: Optional[str]) -> None:
        self._format = value
        if value is None:
            self._template = None
        else:
            self._template = parse_format(value)

    @property
    def template(self) -> Optional[FormatTemplate]:
        return self._template

    @property
    def formatter(self) -> Optional[EntryFormatter]:
        return self._formatter

    @formatter.setter
    def formatter(self, value: Optional[FormatterLike]) -> None:
        if value is None or isinstance(value, EntryFormatter):
            self._formatter = value
        else:
            self._formatter = CallableFormatter(value)

    @property
    def date_format(self) -> Optional[str]:
        return self._date_format

    @date_format.setter
    def date_format(self, value: Optional[str]) -> None:
        self._date_formatter = DateFormatter(value, self._time_zone)
        self._date_format = value

    @property
    def time_zone(self) -> Optional[TimeZoneLike]:
        return self._time_zone

    @time_zone.setter
    def time_zone(self, value: Optional[TimeZoneLike]) -> None:
        # Build first so an invalid zone leaves the previous one in place.
        self._date_formatter = DateFormatter(self._date_format, value)
        self._time_zone = value

    @property
    def date_formatter(self) -> DateFormatter:
        return self._date_formatter

    # Logger capability

    def is_logging(self, severity: Severity) -> bool:
        return is_enabled(severity, self.threshold)

    def log(
        self,
        severity: Severity,
        message: str,
        function: str,
        line: int,
        file: str,
        metadata: Optional[Mapping[str, object]] = None,
    ) -> None:
        """
        Format and write one event if it passes the threshold.

        Args:
            severity: Event severity
            message: Log message
            function: Originating function name
            line: Originating line number
            file: Originating source file path
            metadata: Optional key/value pairs, rendered as ``key=value``
        """
        if not self.is_logging(severity):
            return
        self.write(
            self.format_entry(
                severity,
                message,
                function,
                line,
                file,
                prettify_metadata(metadata),
            )
        )

    def write(self, text: str) -> None:
        self.sink.write_line(text)

    # Rendering

    def render_mode(self) -> RenderMode:
        if self._formatter is not None:
            return RenderMode.FORMATTER
        if self._template is not None:
            return RenderMode.TEMPLATE
        return RenderMode.DEFAULT

    def get_file(self, path: str) -> str:
        """Return ``path`` or its last component, per ``full_file_path``."""
        if self.full_file_path:
            return path
        return os.path.basename(path)

    def format_entry(
        self,
        severity: Severity,
        message: str,
        function: str,
        line: int,
        file: str,
        metadata: Optional[str] = None,
        *,
        label: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> str:
        """
        Render one event into a line of text.

        Args:
            severity: Event severity
            message: Log message
            function: Originating function name
            line: Originating line number
            file: Originating source file path
            metadata: Pre-rendered metadata string, if any
            label: Adapter label, substituted for ``(%label)``
            timestamp: Instant to render, defaults to now

        Returns:
            str: The rendered line, colorized when ``colored`` is set and
            no custom formatter is configured
        """
        entry = LogEntry(
            date=self._date_formatter.format(timestamp),
            severity=severity,
            file=self.get_file(file),
            line=line,
            function=function,
            message=message,
            label=label,
            metadata=metadata,
        )

        mode = self.render_mode()
        if mode is RenderMode.FORMATTER:
            return self._formatter.format(entry)
        if mode is RenderMode.TEMPLATE:
            text = render_template(self._template, entry)
        else:
            text = render_default(entry, self.details)

        if self.colored:
            return colorize(text, severity)
        return text

    # Adapters

    def make_handler(self, label: str) -> "HeliumLogHandler":
        """Create a structlog-compatible handler that logs through this logger."""
        from heliumlog.adapters.structlog_handler import HeliumLogHandler

        return HeliumLogHandler(label, self)

    def __repr__(self) -> str:
        return (
            f"HeliumLogger(threshold={self.threshold.description}, "
            f"sink={type(self.sink).__name__}, mode={self.render_mode().value})"
        )
