"""
Log entry records and rendering strategies.

This module holds the pieces of the substitution engine that do not depend
on logger state: the LogEntry record, the EntryFormatter strategy interface,
template substitution, the two built-in layouts, and colorization.
HeliumLogger (``heliumlog.core.logger``) builds a LogEntry per call, resolves
a RenderMode and delegates here.

Rendering modes, in priority order:
    FORMATTER  A custom EntryFormatter returns the complete line
    TEMPLATE   A compiled FormatTemplate is substituted
    DEFAULT    Built-in detailed or short layout

Built-in layouts:
    detailed   "<date> [<type>] [<file>:<line> <function>] <message>"
    short      "<date> [<type>] <message>"
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional

from heliumlog.core.severity import Severity, TerminalColor
from heliumlog.core.template import Field, FormatTemplate, Literal


@dataclass(frozen=True)
class LogEntry:
    """
    A single log event, ready to be rendered.

    Attributes:
        date (str): Timestamp already rendered by the logger's DateFormatter
        severity (Severity): Event severity
        file (str): Source file, reduced to its basename unless the logger
            is in full-path mode
        line (int): Source line number
        function (str): Originating function name
        message (str): Log message
        label (Optional[str]): Handler label when emitted through an adapter
        metadata (Optional[str]): Rendered ``key=value`` metadata, if any
    """

    date: str
    severity: Severity
    file: str
    line: int
    function: str
    message: str
    label: Optional[str] = None
    metadata: Optional[str] = None

    def value_of(self, field: Field) -> str:
        """Return the substitution value for a template field."""
        if field is Field.MESSAGE:
            return self.message
        if field is Field.FUNCTION:
            return self.function
        if field is Field.LINE:
            return str(self.line)
        if field is Field.FILE:
            return self.file
        if field is Field.TYPE:
            return self.severity.description
        if field is Field.DATE:
            return self.date
        if field is Field.LABEL:
            return self.label or ""
        return self.metadata or ""


class EntryFormatter(ABC):
    """
    Strategy that renders a complete log line from a LogEntry.

    A configured EntryFormatter takes precedence over templates and the
    built-in layouts, and its output is written verbatim.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """Render ``entry`` into a single line of text."""
        pass


class CallableFormatter(EntryFormatter):
    """Adapts a plain ``Callable[[LogEntry], str]`` to EntryFormatter."""

    def __init__(self, func: Callable[[LogEntry], str]) -> None:
        self.func = func

    def format(self, entry: LogEntry) -> str:
        return self.func(entry)


class RenderMode(str, Enum):
    FORMATTER = "formatter"
    TEMPLATE = "template"
    DEFAULT = "default"


def render_template(template: FormatTemplate, entry: LogEntry) -> str:
    """Substitute every token of ``template`` with values from ``entry``."""
    parts = []
    for segment in template:
        if isinstance(segment, Literal):
            parts.append(segment.text)
        else:
            parts.append(entry.value_of(segment.field))
    return "".join(parts)


def render_default(entry: LogEntry, details: bool) -> str:
    """Render one of the two built-in layouts."""
    if details:
        line = (
            f"{entry.date} [{entry.severity.description}] "
            f"[{entry.file}:{entry.line} {entry.function}] {entry.message}"
        )
    else:
        line = f"{entry.date} [{entry.severity.description}] {entry.message}"

    if entry.metadata:
        line = f"{line} {entry.metadata}"
    return line


def colorize(text: str, severity: Severity) -> str:
    """Wrap ``text`` in the severity color and reset to the default foreground."""
    return f"{severity.color.value}{text}{TerminalColor.FOREGROUND.value}"


def prettify_metadata(metadata: Optional[Mapping[str, object]]) -> Optional[str]:
    """
    Render metadata as space separated ``key=value`` pairs.

    Returns None for missing or empty metadata so callers can tell "no
    metadata" apart from an empty rendering.
    """
    if not metadata:
        return None
    return " ".join(f"{key}={value}" for key, value in metadata.items())


def merge_metadata(
    base: Mapping[str, object], overrides: Mapping[str, object]
) -> Dict[str, object]:
    """Merge two metadata mappings; keys in ``overrides`` win."""
    merged = dict(base)
    merged.update(overrides)
    return merged
