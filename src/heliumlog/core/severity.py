"""
Severity model for heliumlog.

Severities form a closed, totally ordered set. The integer value of each
member is its rank, and filtering is a plain rank comparison: an event is
emitted when its rank is greater than or equal to the configured threshold.

Ranking:
    ENTRY < EXIT < TRACE < DEBUG < VERBOSE < INFO < NOTICE < WARNING
    < ERROR < CRITICAL

ENTRY and EXIT mark function entry and exit and sit below everything else,
so a threshold of ENTRY lets every event through. VERBOSE sits between DEBUG
and INFO, which means the default VERBOSE threshold hides DEBUG output.

Human-readable labels and terminal colors come from explicit lookup tables
rather than from member names.

Example:
    >>> from heliumlog.core.severity import Severity, is_enabled
    >>> is_enabled(Severity.ERROR, Severity.WARNING)
    True
    >>> Severity.parse("warn").description
    'WARNING'
"""

from enum import Enum, IntEnum
from typing import Dict, Union

from heliumlog.core.exceptions.custom_exceptions import InvalidSeverityError


class TerminalColor(str, Enum):
    """ANSI escape sequences used to colorize rendered lines."""

    WHITE = "\x1b[0;37m"
    RED = "\x1b[0;31m"
    YELLOW = "\x1b[0;33m"
    FOREGROUND = "\x1b[0;39m"
    BACKGROUND = "\x1b[0;49m"


class Severity(IntEnum):
    """
    Ordered log severity.

    The value of each member is its rank. Use ``description`` for the label
    written into log lines and ``color`` for the ANSI prefix applied when
    colorization is enabled.
    """

    ENTRY = 1
    EXIT = 2
    TRACE = 3
    DEBUG = 4
    VERBOSE = 5
    INFO = 6
    NOTICE = 7
    WARNING = 8
    ERROR = 9
    CRITICAL = 10

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def color(self) -> TerminalColor:
        return _COLORS.get(self, TerminalColor.FOREGROUND)

    def is_enabled(self, threshold: "Severity") -> bool:
        return is_enabled(self, threshold)

    @classmethod
    def parse(cls, value: Union["Severity", int, str]) -> "Severity":
        """
        Resolve a severity from a member, a rank or a name.

        Names are matched case-insensitively against both member names and
        descriptions, and a handful of common aliases (``warn``, ``err``,
        ``fatal``) are accepted.

        Args:
            value: Severity member, integer rank or textual name

        Returns:
            Severity: The matching member

        Raises:
            InvalidSeverityError: If the value does not name a severity
        """
        if isinstance(value, Severity):
            return value
        if isinstance(value, bool):
            raise InvalidSeverityError(
                f"Invalid severity: {value!r}",
                error_code="INVALID_SEVERITY",
                details={"value": value},
            )
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidSeverityError(
                    f"No severity with rank {value}",
                    error_code="INVALID_SEVERITY",
                    details={"value": value},
                ) from e

        key = str(value).strip().lower()
        if key in _NAMES:
            return _NAMES[key]
        raise InvalidSeverityError(
            f"Unknown severity name: {value!r}",
            error_code="INVALID_SEVERITY",
            details={"value": value, "valid": sorted(_NAMES)},
        )


_DESCRIPTIONS: Dict[Severity, str] = {
    Severity.ENTRY: "ENTRY",
    Severity.EXIT: "EXIT",
    Severity.TRACE: "TRACE",
    Severity.DEBUG: "DEBUG",
    Severity.VERBOSE: "VERBOSE",
    Severity.INFO: "INFO",
    Severity.NOTICE: "NOTICE",
    Severity.WARNING: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.CRITICAL: "CRITICAL",
}

_COLORS: Dict[Severity, TerminalColor] = {
    Severity.WARNING: TerminalColor.YELLOW,
    Severity.ERROR: TerminalColor.RED,
    Severity.CRITICAL: TerminalColor.RED,
}

_NAMES: Dict[str, Severity] = {
    **{description.lower(): level for level, description in _DESCRIPTIONS.items()},
    "warn": Severity.WARNING,
    "err": Severity.ERROR,
    "fatal": Severity.CRITICAL,
}


def is_enabled(level: Severity, threshold: Severity) -> bool:
    """Return True when ``level`` passes the ``threshold`` filter."""
    return level.rank >= threshold.rank
