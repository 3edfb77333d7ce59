"""
Custom exception hierarchy for heliumlog configuration errors.

Formatting and dispatch never raise on user input: unknown template tokens
degrade to literal text and facade calls without an active logger are
no-ops. The exceptions below are only raised while a logger or its settings
are being configured, so misconfiguration surfaces early instead of on the
first log call.

Exception Hierarchy:
    HeliumLogError (base)
    ├── ConfigurationError: Invalid logger or settings values
    ├── InvalidSeverityError: A severity name or rank that does not exist
    └── SinkError: An output target that cannot receive text

Example:
    >>> try:
    ...     logger.time_zone = "Mars/Olympus_Mons"
    ... except ConfigurationError as e:
    ...     print(e.error_code, e.details)
    INVALID_TIME_ZONE {'time_zone': 'Mars/Olympus_Mons'}
"""

from typing import Any, Dict, Optional


class HeliumLogError(Exception):
    """
    Base exception class for all heliumlog errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier, defaults to
            the class name
        details (Dict[str, Any]): Additional contextual information

    Example:
        >>> raise HeliumLogError(
        ...     "Logger could not be created",
        ...     error_code="LOGGER_CREATE_ERROR",
        ...     details={"threshold": "verbose"}
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(HeliumLogError):
    """
    Raised when logger configuration or settings validation fails.

    Common scenarios:
        - Unknown IANA time zone name for ``time_zone``
        - Environment overrides that cannot be converted to logger options

    Example:
        >>> raise ConfigurationError(
        ...     "Unknown time zone 'Mars/Olympus_Mons'",
        ...     error_code="INVALID_TIME_ZONE",
        ...     details={"time_zone": "Mars/Olympus_Mons"}
        ... )
    """

    pass


class InvalidSeverityError(HeliumLogError):
    """Raised when a value cannot be resolved to a Severity"""

    pass


class SinkError(HeliumLogError):
    """Raised when an output target cannot accept text"""

    pass
