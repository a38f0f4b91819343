"""
Content Merkle - Logging Configuration

Library modules only emit structlog events. Nothing is configured on
import; applications call setup_logging() or configure structlog and the
"content_merkle" stdlib logger themselves.
"""

import logging
import sys

import structlog

from content_merkle.core.config import settings

LIBRARY_LOGGER = "content_merkle"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: str | None = None) -> None:
    """
    Configure structured logging for an application using the library.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level_name!r}")

    use_json = settings.ENV == "production"

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger(LIBRARY_LOGGER).setLevel(log_level)
