# core/logging_config.py

"""
Structured logging configuration using structlog.

structlog renders each event and hands it to the standard `logging` module,
whose handler writes to stderr so log lines never interleave with menu text.

Example:
    >>> from core.config import get_settings
    >>> from core.logging_config import setup_logging, get_logger
    >>> setup_logging(get_settings())
    >>> logger = get_logger(__name__)
    >>> logger.info("enrollment_committed", student_id=1, course_id=2)
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from core.config import Settings


def setup_logging(settings: "Settings") -> None:
    """
    Configures structlog and the standard library logging module.

    Args:
        settings: Application settings providing `log_level`, `debug`, and `sql_echo`.
            `debug` forces the DEBUG level and colors the console output.
    """
    if settings.debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=settings.debug),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)

    sqlalchemy_level = logging.INFO if settings.sql_echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sqlalchemy_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for the given module name.

    Args:
        name: Usually `__name__` of the calling module.
    """
    return structlog.get_logger(name)
