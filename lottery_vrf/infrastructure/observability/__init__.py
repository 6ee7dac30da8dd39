"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation ID management so every log line of one awaited flow
  can be grouped together

Usage:
    from lottery_vrf.infrastructure.observability import (
        configure_structlog,
        get_correlation_id,
        set_correlation_id,
    )

    # At startup
    configure_structlog(environment="production")
"""

from lottery_vrf.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from lottery_vrf.infrastructure.observability.logging import configure_structlog

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
