"""Observability infrastructure for structured logging.

Usage:
    from mockgen.infrastructure.observability import configure_structlog

    configure_structlog(environment="development")
"""

from mockgen.infrastructure.observability.logging import configure_structlog

__all__: list[str] = [
    "configure_structlog",
]
