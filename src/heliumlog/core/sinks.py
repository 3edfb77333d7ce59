"""
Output sinks for rendered log lines.

A sink receives finished lines, one call per line, and writes them
synchronously. Loggers are composed with a sink instead of being subclassed
per output target.

Classes:
    Sink: Abstract line writer
    StdoutSink: Process standard output, flushed after every line (default)
    StreamSink: Any text stream (stderr, open files, io.StringIO)
    MemorySink: Keeps lines in a list, for tests and tooling
"""

import sys
from abc import ABC, abstractmethod
from typing import List, TextIO

from heliumlog.core.exceptions.custom_exceptions import SinkError


class Sink(ABC):
    """Destination for rendered log lines."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a newline."""
        pass


class StreamSink(Sink):
    """
    Writes lines to a text stream.

    The stream is flushed after every line when it supports flushing, so
    output is not lost if the process terminates abnormally.

    Attributes:
        stream (TextIO): Target stream

    Example:
        >>> import sys
        >>> sink = StreamSink(sys.stderr)
        >>> sink.write_line("to stderr")
    """

    def __init__(self, stream: TextIO) -> None:
        if not callable(getattr(stream, "write", None)):
            raise SinkError(
                f"Object of type {type(stream).__name__} has no write() method",
                error_code="SINK_NOT_WRITABLE",
                details={"stream": repr(stream)},
            )
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write_line(self, text: str) -> None:
        stream = self.stream
        stream.write(text + "\n")
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()


class StdoutSink(StreamSink):
    """
    Writes lines to the process standard output.

    ``sys.stdout`` is looked up on every write, so redirection done after
    the sink was created (test capture, ``contextlib.redirect_stdout``)
    is honoured.
    """

    def __init__(self) -> None:
        pass

    @property
    def stream(self) -> TextIO:
        return sys.stdout


class MemorySink(Sink):
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()


def is_default_sink(sink: Sink) -> bool:
    """True for the standard output sink that generic activation assumes."""
    return isinstance(sink, StdoutSink)
