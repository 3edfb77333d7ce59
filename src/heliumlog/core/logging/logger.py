"""
Diagnostics logging for heliumlog itself.

heliumlog reports its own problems, such as a refused activation, through
structlog. This is separate from the log lines heliumlog renders for its
users: diagnostics go wherever the host application routes structlog.

Nothing is configured on import. Applications that already configure
structlog keep their setup; ``setup_logging`` is provided for the heliumlog
CLI and for programs that want a ready-made configuration.

Functions:
    setup_logging(settings): Configure structlog and stdlib logging
    get_logger(name): Get a structlog logger

Example:
    >>> from heliumlog.core.logging.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Template has no tokens", format="plain text")
"""

import logging
import sys
from typing import Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from heliumlog.core.config.settings import Settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Handler selection:
        - Development or DEBUG: rich console handler on stderr
        - Otherwise: plain stream handler on stderr

    Renderer selection follows ``LOG_FORMAT``: ``text`` uses structlog's
    console renderer, ``json`` its JSON renderer.

    Args:
        settings: Settings to read; a fresh instance when omitted
    """
    settings = settings or Settings()

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    handlers = []
    if settings.DEBUG or settings.ENVIRONMENT == "development":
        console = Console(stderr=True)
        rich_handler = RichHandler(
            console=console,
            show_time=False,
            show_level=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        rich_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(rich_handler)
    else:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(stream_handler)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger for heliumlog diagnostics.

    Args:
        name (str): Logger name, typically __name__ of the calling module

    Returns:
        structlog.BoundLogger: Lazily configured logger proxy
    """
    return structlog.get_logger(name)
