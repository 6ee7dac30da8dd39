"""Structured-logging mixin for harness services."""

import structlog

from lottery_vrf.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Gives a service a structlog logger bound to its class name.

    Log lines from one awaited workflow share the correlation id taken
    from context, so a trigger, its event and any failure can be grouped.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "verification") -> None:
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Bind operation name, current correlation id and extra context."""
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
