"""Structured logging configuration with structlog.

Supports both production (JSON) and development (console) output.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "randomness_requested",
        "correlation_id": "uuid",
        ...additional context
    }

Usage:
    from lottery_vrf.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output

    import structlog
    log = structlog.get_logger()
    log.info("event_name", key="value")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from lottery_vrf.infrastructure.observability.correlation import (
    correlation_id_processor,
)

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for the process.

    Should be called once, before any flow runs.

    Args:
        environment: 'production' for JSON output, anything else for
            colored console output. Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
