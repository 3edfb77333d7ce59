"""
heliumlog diagnostics logging.

heliumlog's own warnings (for example a refused activation) are emitted
through structlog so they follow the host application's logging setup.
``setup_logging`` provides a default configuration with rich console
output for development and plain stderr output otherwise.

Example:
    >>> from heliumlog.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Unable to activate logger", sink="StreamSink")
"""

from heliumlog.core.logging.logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
