"""
Date formatting for rendered log lines.

A DateFormatter binds a date pattern and a time zone into a reusable,
immutable formatting object. Loggers rebuild their formatter whenever
either setting is reassigned, so per-call formatting never re-resolves the
time zone.

Patterns:
    None       ISO-8601 with millisecond precision,
               e.g. ``2026-10-19T08:30:00.123+00:00``
    str        Any ``datetime.strftime`` pattern, e.g. ``"%d/%m/%Y %H:%M"``

Time zones:
    None       The system local time zone
    str        An IANA zone name such as ``"Europe/Berlin"`` or ``"UTC"``
    tzinfo     Any ``datetime.tzinfo`` instance
"""

from datetime import datetime, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from heliumlog.core.exceptions.custom_exceptions import ConfigurationError

TimeZoneLike = Union[str, tzinfo]


def resolve_time_zone(time_zone: Optional[TimeZoneLike]) -> Optional[tzinfo]:
    """
    Turn a time zone setting into a tzinfo.

    Args:
        time_zone: IANA zone name, tzinfo instance or None for local time

    Returns:
        Optional[tzinfo]: Resolved zone, None meaning system local time

    Raises:
        ConfigurationError: If the zone name is unknown
    """
    if time_zone is None or isinstance(time_zone, tzinfo):
        return time_zone
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown time zone '{time_zone}'",
            error_code="INVALID_TIME_ZONE",
            details={"time_zone": time_zone},
        ) from e


class DateFormatter:
    """
    Formats instants with a fixed pattern and time zone.

    Attributes:
        pattern (Optional[str]): strftime pattern, None for ISO-8601 with
            milliseconds
        time_zone (Optional[tzinfo]): Target zone, None for local time

    Example:
        >>> formatter = DateFormatter("%Y-%m-%d %H:%M", "UTC")
        >>> formatter.format(datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc))
        '2026-10-19 08:30'
    """

    def __init__(
        self,
        pattern: Optional[str] = None,
        time_zone: Optional[TimeZoneLike] = None,
    ) -> None:
        self.pattern = pattern
        self.time_zone = resolve_time_zone(time_zone)

    def format(self, moment: Optional[datetime] = None) -> str:
        """Render ``moment`` (default: now) in the configured zone and pattern."""
        if moment is None:
            moment = datetime.now(self.time_zone)
        # Naive datetimes are taken as local time, as astimezone() does.
        moment = moment.astimezone(self.time_zone)

        if self.pattern is None:
            return moment.isoformat(timespec="milliseconds")
        return moment.strftime(self.pattern)

    def __repr__(self) -> str:
        return f"DateFormatter(pattern={self.pattern!r}, time_zone={self.time_zone!r})"
