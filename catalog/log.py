"""
Structured logging for the catalog app.
Configures stdlib logging and structlog with a JSON or console renderer.
"""

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "console")


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format, ``json`` or ``console``

    Raises:
        ValueError: if the level or format is not recognised
    """
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of: {list(LOG_LEVELS)}")
    fmt = log_format.lower()
    if fmt not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of: {list(LOG_FORMATS)}")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )
    logging.getLogger().setLevel(getattr(logging, level))

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
