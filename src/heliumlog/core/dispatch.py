"""
Dispatch facade for heliumlog.

A Dispatcher is an explicit handle holding an optional active logger. Its
per-severity methods capture the caller's function, line and file and
forward the event to the active logger. Without an active logger every
call is a no-op and ``is_logging`` returns False.

Libraries should accept a Dispatcher (or a HeliumLogger) as a parameter.
The process-wide default dispatcher and its module-level shortcuts live in
``heliumlog.log`` and are meant for application entry points.

Activation:
    use(threshold)             Default logger writing to standard output
    use(threshold, logger)     A prepared logger, if it writes to stdout
    use_stream(stream, ...)    A logger bound to a specific text stream
    dispatcher.logger = x      Direct assignment, any sink

``use`` assumes standard output. Handing it a logger bound to another sink
is reported as a usage warning and leaves the current logger in place.

Example:
    >>> import sys
    >>> from heliumlog.core.dispatch import Dispatcher
    >>> from heliumlog.core.severity import Severity
    >>>
    >>> dispatcher = Dispatcher()
    >>> dispatcher.info("dropped, nothing is active")
    >>> dispatcher.use_stream(sys.stderr, Severity.INFO)
    >>> dispatcher.warning("written to stderr")
"""

import sys
from typing import Optional, TextIO, Tuple

from heliumlog.core.logger import HeliumLogger
from heliumlog.core.logging.logger import get_logger
from heliumlog.core.severity import Severity
from heliumlog.core.sinks import StreamSink, is_default_sink

logger = get_logger(__name__)


def _call_site(depth: int) -> Tuple[str, int, str]:
    """Return (function, line, file) of the frame ``depth`` levels above the caller."""
    frame = sys._getframe(depth + 1)
    code = frame.f_code
    return code.co_name, frame.f_lineno, code.co_filename


def unbuffer_stdout() -> None:
    """Switch standard output to write-through so lines appear immediately."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(line_buffering=True, write_through=True)


class Dispatcher:
    """
    Forwards log calls to an optional active HeliumLogger.

    Attributes:
        logger (Optional[HeliumLogger]): The active logger, None when
            logging is off

    Every severity method accepts explicit ``function``, ``line`` and
    ``file`` arguments; any that are omitted are taken from the calling
    frame. Wrappers around these methods should pass a larger
    ``stacklevel`` so the call site of their own caller is recorded.
    """

    def __init__(self, logger: Optional[HeliumLogger] = None) -> None:
        self.logger = logger

    # Activation

    def use(
        self,
        threshold: Severity = Severity.VERBOSE,
        logger: Optional[HeliumLogger] = None,
    ) -> bool:
        """
        Activate a logger that writes to standard output.

        Args:
            threshold: Threshold for the default logger; ignored when
                ``logger`` is given
            logger: Optional prepared logger to activate

        Returns:
            bool: True if a logger was activated, False if the request was
            refused because ``logger`` is bound to a non-stdout sink
        """
        if logger is None:
            logger = HeliumLogger(threshold)
        elif not is_default_sink(logger.sink):
            _log_refused_activation(logger)
            return False

        unbuffer_stdout()
        self.logger = logger
        return True

    def use_stream(
        self,
        stream: TextIO,
        threshold: Severity = Severity.VERBOSE,
    ) -> HeliumLogger:
        """Activate and return a logger writing to ``stream``."""
        self.logger = HeliumLogger(threshold, StreamSink(stream))
        return self.logger

    def clear(self) -> None:
        self.logger = None

    # Dispatch

    def is_logging(self, severity: Severity) -> bool:
        return self.logger is not None and self.logger.is_logging(severity)

    def log(
        self,
        severity: Severity,
        message: str,
        function: Optional[str] = None,
        line: Optional[int] = None,
        file: Optional[str] = None,
        *,
        stacklevel: int = 1,
    ) -> None:
        """Forward one event to the active logger, if any."""
        active = self.logger
        if active is None or not active.is_logging(severity):
            return

        if function is None or line is None or file is None:
            site_function, site_line, site_file = _call_site(stacklevel)
            function = site_function if function is None else function
            line = site_line if line is None else line
            file = site_file if file is None else file

        active.log(severity, message, function, line, file)

    def entry(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.ENTRY, message, function, line, file, stacklevel=stacklevel + 1)

    def exit(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.EXIT, message, function, line, file, stacklevel=stacklevel + 1)

    def trace(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.TRACE, message, function, line, file, stacklevel=stacklevel + 1)

    def debug(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.DEBUG, message, function, line, file, stacklevel=stacklevel + 1)

    def verbose(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.VERBOSE, message, function, line, file, stacklevel=stacklevel + 1)

    def info(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.INFO, message, function, line, file, stacklevel=stacklevel + 1)

    def notice(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.NOTICE, message, function, line, file, stacklevel=stacklevel + 1)

    def warning(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.WARNING, message, function, line, file, stacklevel=stacklevel + 1)

    def error(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.ERROR, message, function, line, file, stacklevel=stacklevel + 1)

    def critical(self, message, function=None, line=None, file=None, *, stacklevel=1):
        self.log(Severity.CRITICAL, message, function, line, file, stacklevel=stacklevel + 1)


def _log_refused_activation(rejected: HeliumLogger) -> None:
    logger.warning(
        "Unable to activate a logger bound to a custom sink through use(). "
        "Use Dispatcher.use_stream() or assign Dispatcher.logger instead.",
        sink=type(rejected.sink).__name__,
    )
