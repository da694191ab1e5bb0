"""Structured logging configuration with structlog.

This module provides centralized structlog configuration for mockgen,
supporting both production (JSON) and development (console) output modes.
Log entries go to stderr so generated source written to stdout stays clean.

Log Entry Format:
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "generation_completed",
        "doubles": ["TestProtocolMock"],
        ...additional context
    }

Usage:
    # At program startup
    from mockgen.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output

    # Then use structlog normally
    from structlog import get_logger
    logger = get_logger(__name__)
    logger.info("event_name", key="value")
"""

import logging
import os
import sys

import structlog
from structlog.typing import Processor

# Environment variable for log level (default: WARNING)
LOG_LEVEL_ENV = "MOCKGEN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.WARNING).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for mockgen.

    Should be called once, by the program embedding the generator.
    Library code never calls it.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
