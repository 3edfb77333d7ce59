"""
structlog integration for heliumlog.

HeliumLogHandler binds a HeliumLogger to a label, a handler-level
threshold and handler metadata. It can be driven directly through ``log``
or installed as the final processor of a structlog pipeline, where it
renders each event with the HeliumLogger's template, date and color
settings.

Metadata handling:
    - Handler metadata is rendered once, whenever it is assigned, and that
      rendering is reused for calls without call-site metadata.
    - Call-site metadata (``log(..., metadata=...)`` or structlog
      key/value pairs and bound context) is merged over the handler
      metadata; call-site keys win.

Classes:
    HeliumLogHandler: Label/level/metadata handler and structlog renderer
    SinkLogger: structlog wrapped logger that writes through a HeliumLogger
    SinkLoggerFactory: structlog logger factory producing SinkLoggers

Functions:
    make_handler(label): Handler backed by a shared default HeliumLogger
    configure_structlog(...): Route structlog through heliumlog

Example:
    >>> import structlog
    >>> from heliumlog.adapters.structlog_handler import configure_structlog
    >>>
    >>> handler = configure_structlog(label="api")
    >>> handler["service"] = "billing"
    >>> structlog.get_logger().warning("Slow response", elapsed_ms=812)
    2026-10-19T08:30:00.123+00:00 [WARNING] [app.py:5 <module>] Slow response service=billing elapsed_ms=812
"""

from typing import Any, Dict, Mapping, MutableMapping, Optional

import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder

from heliumlog.core.entry import merge_metadata, prettify_metadata
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity

# structlog method names to severities; unknown names log at INFO
METHOD_SEVERITIES: Dict[str, Severity] = {
    "trace": Severity.TRACE,
    "debug": Severity.DEBUG,
    "info": Severity.INFO,
    "msg": Severity.INFO,
    "log": Severity.INFO,
    "notice": Severity.NOTICE,
    "warn": Severity.WARNING,
    "warning": Severity.WARNING,
    "err": Severity.ERROR,
    "error": Severity.ERROR,
    "exception": Severity.ERROR,
    "critical": Severity.CRITICAL,
    "fatal": Severity.CRITICAL,
}

_default_logger: Optional[HeliumLogger] = None


def default_logger() -> HeliumLogger:
    """Shared HeliumLogger used by ``make_handler``, created on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = HeliumLogger()
    return _default_logger


class HeliumLogHandler:
    """
    A labelled handler that renders through a HeliumLogger.

    Attributes:
        label (str): Handler label, substituted for ``(%label)``
        logger (HeliumLogger): Backend used for formatting and output
        level (Severity): Lowest severity this handler emits (default INFO)
        metadata (Dict[str, Any]): Handler metadata; assigning it
            re-renders the cached ``key=value`` string

    The handler filters on its own ``level`` only; the backend logger's
    threshold applies to the dispatch facade, not to handlers.
    """

    def __init__(
        self,
        label: str,
        logger: HeliumLogger,
        level: Severity = Severity.INFO,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.label = label
        self.logger = logger
        self.level = level
        self.metadata = metadata or {}

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, value: Severity) -> None:
        self._level = Severity.parse(value)

    @property
    def metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)

    @metadata.setter
    def metadata(self, value: Mapping[str, Any]) -> None:
        self._metadata = dict(value)
        self._pretty_metadata = prettify_metadata(self._metadata)

    @property
    def pretty_metadata(self) -> Optional[str]:
        return self._pretty_metadata

    def __getitem__(self, key: str) -> Optional[Any]:
        return self._metadata.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """Set a metadata key; assigning None removes it."""
        metadata = self._metadata
        if value is None:
            metadata.pop(key, None)
        else:
            metadata[key] = value
        self.metadata = metadata

    def __delitem__(self, key: str) -> None:
        metadata = self._metadata
        del metadata[key]
        self.metadata = metadata

    def copy(self) -> "HeliumLogHandler":
        """Independent handler sharing the backend logger."""
        return HeliumLogHandler(self.label, self.logger, self.level, self._metadata)

    def is_logging(self, level: Severity) -> bool:
        return level.is_enabled(self.level)

    def render(
        self,
        level: Severity,
        message: str,
        metadata: Optional[Mapping[str, Any]] = None,
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> str:
        """Render one event, merging call-site metadata over handler metadata."""
        if metadata:
            pretty = prettify_metadata(merge_metadata(self._metadata, metadata))
        else:
            pretty = self._pretty_metadata

        return self.logger.format_entry(
            level,
            message,
            function,
            line,
            file,
            pretty,
            label=self.label,
        )

    def log(
        self,
        level: Severity,
        message: str,
        metadata: Optional[Mapping[str, Any]] = None,
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> None:
        """Render and write one event if it passes the handler level."""
        if not self.is_logging(level):
            return
        self.logger.write(self.render(level, message, metadata, file, function, line))

    def __call__(
        self, _: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        """
        structlog renderer entry point.

        Consumes the event dict: ``event`` becomes the message, call-site
        keys added by CallsiteParameterAdder become file/function/line, a
        rendered ``exception`` is appended on the following lines, and
        every remaining key is call-site metadata.

        Raises:
            structlog.DropEvent: If the event is below the handler level
        """
        level = METHOD_SEVERITIES.get(method_name, Severity.INFO)
        if not self.is_logging(level):
            raise structlog.DropEvent

        message = str(event_dict.pop("event", ""))
        pathname = event_dict.pop("pathname", None)
        filename = event_dict.pop("filename", None)
        function = event_dict.pop("func_name", "")
        line = event_dict.pop("lineno", 0)
        exception = event_dict.pop("exception", None)
        event_dict.pop("exc_info", None)

        text = self.render(
            level,
            message,
            event_dict,
            pathname or filename or "",
            function,
            line,
        )
        if exception:
            text = f"{text}\n{exception}"
        return text

    def __repr__(self) -> str:
        return (
            f"HeliumLogHandler(label={self.label!r}, level={self.level.description}, "
            f"metadata={self._metadata!r})"
        )


class SinkLogger:
    """
    structlog wrapped logger writing pre-rendered lines through a
    HeliumLogger.

    The logger's current ``sink`` is resolved on every write, so
    reassigning it after ``configure_structlog`` takes effect immediately.
    """

    def __init__(self, logger: HeliumLogger) -> None:
        self._logger = logger

    def msg(self, message: str) -> None:
        self._logger.write(message)

    log = debug = info = warn = warning = msg
    fatal = failure = err = error = critical = exception = msg


class SinkLoggerFactory:
    """structlog logger factory returning SinkLoggers for one HeliumLogger."""

    def __init__(self, logger: HeliumLogger) -> None:
        self._logger = logger

    def __call__(self, *args: Any) -> SinkLogger:
        return SinkLogger(self._logger)


def make_handler(label: str) -> HeliumLogHandler:
    """Create a handler backed by the shared default HeliumLogger."""
    return HeliumLogHandler(label, default_logger())


def configure_structlog(
    logger: Optional[HeliumLogger] = None,
    label: str = "heliumlog",
    level: Severity = Severity.INFO,
) -> HeliumLogHandler:
    """
    Configure structlog to render and write through heliumlog.

    Installs a processor chain of context merging, call-site capture,
    exception formatting and a HeliumLogHandler, and a logger factory that
    writes to the HeliumLogger's current sink.

    Args:
        logger: Backend logger; the shared default logger when omitted
        label: Handler label
        level: Handler level

    Returns:
        HeliumLogHandler: The installed handler; mutate its ``level`` or
        ``metadata`` to affect subsequent events
    """
    handler = HeliumLogHandler(label, logger or default_logger(), level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            CallsiteParameterAdder(
                {
                    CallsiteParameter.PATHNAME,
                    CallsiteParameter.FUNC_NAME,
                    CallsiteParameter.LINENO,
                }
            ),
            structlog.processors.format_exc_info,
            handler,
        ],
        logger_factory=SinkLoggerFactory(handler.logger),
        cache_logger_on_first_use=False,
    )
    return handler
