"""
Facades over structlog and OpenTelemetry.

The client talks to these thin wrappers rather than to the libraries directly,
which keeps trace context on every log record and makes both sides easy to
replace in tests.
"""

from typing import Any, Dict, Optional

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class TracingFacade:
    """Facade for OpenTelemetry tracing."""

    def __init__(self, name: str):
        """
        Initialize a new tracing facade.

        Args:
            name: The name of the tracer
        """
        self.name = name
        self.tracer = trace.get_tracer(name)

    def start_span(self, name: str, attributes: Optional[Dict[str, Any]] = None):
        """
        Start a new span without making it current.

        Args:
            name: The name of the span
            attributes: Optional attributes to set on the span

        Returns:
            The new span
        """
        return self.tracer.start_span(name, attributes=attributes)

    def start_as_current_span(
        self, name: str, attributes: Optional[Dict[str, Any]] = None
    ):
        """
        Start a new span and make it the current span.

        Args:
            name: The name of the span
            attributes: Optional attributes to set on the span

        Returns:
            A context manager yielding the span
        """
        return self.tracer.start_as_current_span(name, attributes=attributes)


class LoggingFacade:
    """Facade for structlog logging with trace context."""

    def __init__(self, name: str):
        """
        Initialize a new logging facade.

        Args:
            name: The name of the logger
        """
        self.name = name
        self.logger = structlog.get_logger(name)

    def _add_trace_context(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        current_span = trace.get_current_span()
        context = current_span.get_span_context()
        if context.is_valid:
            kwargs["trace_id"] = format(context.trace_id, "032x")
            kwargs["span_id"] = format(context.span_id, "016x")
        return kwargs

    def _mark_span_error(self, event: str) -> None:
        current_span = trace.get_current_span()
        if current_span.is_recording():
            current_span.set_status(Status(StatusCode.ERROR, event))

    def debug(self, event: str, **kwargs: Any) -> None:
        self.logger.debug(event, **self._add_trace_context(kwargs))

    def info(self, event: str, **kwargs: Any) -> None:
        self.logger.info(event, **self._add_trace_context(kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        self.logger.warning(event, **self._add_trace_context(kwargs))

    def error(self, event: str, **kwargs: Any) -> None:
        """Log an error and flag the current span as failed."""
        self._mark_span_error(event)
        self.logger.error(event, **self._add_trace_context(kwargs))

    def critical(self, event: str, **kwargs: Any) -> None:
        """Log a critical error and flag the current span as failed."""
        self._mark_span_error(event)
        self.logger.critical(event, **self._add_trace_context(kwargs))
