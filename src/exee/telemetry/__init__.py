"""
Telemetry module for exee.

This module provides the observability features used by the client:
structured logging through structlog and tracing through OpenTelemetry.
"""

from exee.telemetry.config import configure_telemetry
from exee.telemetry.facade import LoggingFacade, TracingFacade


def get_telemetry(name: str) -> tuple:
    """
    Get tracer and logger instances for the given name.

    Args:
        name: The name to use for the tracer and logger

    Returns:
        A tuple containing a tracer and logger
    """
    return TracingFacade(name), LoggingFacade(name)


__all__ = [
    "TracingFacade",
    "LoggingFacade",
    "configure_telemetry",
    "get_telemetry",
]
