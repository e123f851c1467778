"""
Configuration functions for the telemetry module.

This module wires up OpenTelemetry and structlog with sensible defaults and
reads the standard ``OTEL_*`` environment variables.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)


def get_env_bool(name: str, default: bool = False) -> bool:
    """
    Get a boolean value from an environment variable.

    Args:
        name: The name of the environment variable
        default: The default value if the environment variable is not set

    Returns:
        The boolean value
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "y", "t")


def get_env_dict(name: str, default: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Get a dictionary from a comma-separated ``key=value`` environment variable.

    Args:
        name: The name of the environment variable
        default: The default value if the environment variable is not set

    Returns:
        The dictionary
    """
    value = os.environ.get(name)
    if not value:
        return default or {}

    result = {}
    for pair in value.split(","):
        if "=" in pair:
            key, val = pair.split("=", 1)
            result[key.strip()] = val.strip()
    return result


def configure_telemetry(
    service_name: Optional[str] = None,
    resource_attributes: Optional[Dict[str, str]] = None,
    trace_enabled: Optional[bool] = None,
    log_level: str = "INFO",
    log_processors: Optional[List[Any]] = None,
    trace_exporters: Optional[List[str]] = None,
) -> bool:
    """
    Configure OpenTelemetry and structlog with sensible defaults.

    Args:
        service_name: The name of the service
        resource_attributes: Additional resource attributes
        trace_enabled: Whether tracing is enabled
        log_level: The log level
        log_processors: Additional log processors, run before rendering
        trace_exporters: The trace exporters to use

    Returns:
        True if tracing is enabled, False otherwise
    """
    if trace_enabled is None:
        trace_enabled = not get_env_bool("OTEL_SDK_DISABLED", False)

    if service_name is None:
        service_name = os.environ.get("OTEL_SERVICE_NAME", "exee")

    env_attrs = get_env_dict("OTEL_RESOURCE_ATTRIBUTES")
    resource_attributes = {**env_attrs, **(resource_attributes or {})}
    resource_attributes["service.name"] = service_name

    if trace_enabled:
        tracer_provider = TracerProvider(resource=Resource.create(resource_attributes))
        trace.set_tracer_provider(tracer_provider)
        _configure_exporters(tracer_provider, trace_exporters)

    _configure_structlog(log_level, log_processors)

    return trace_enabled


def _configure_exporters(tracer_provider, exporters=None):
    """
    Configure trace exporters.

    Args:
        tracer_provider: The tracer provider to configure
        exporters: The exporters to use, or None to read OTEL_TRACES_EXPORTER
    """
    if exporters is None:
        exporter_env = os.environ.get("OTEL_TRACES_EXPORTER", "console")
        exporters = [ex.strip() for ex in exporter_env.split(",") if ex.strip()]

    for exporter_name in exporters:
        if exporter_name == "console":
            tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        elif exporter_name != "none":
            logger.warning("Unsupported trace exporter ignored: %s", exporter_name)


def add_trace_context(_, __, event_dict):
    """Add trace context to log entries if a span is active."""
    context = trace.get_current_span().get_span_context()
    if context.is_valid:
        event_dict.setdefault("trace_id", format(context.trace_id, "032x"))
        event_dict.setdefault("span_id", format(context.span_id, "016x"))
    return event_dict


def _configure_structlog(log_level, processors=None):
    """
    Configure structlog.

    Args:
        log_level: The log level name
        processors: Additional processors to add
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
    )

    chain = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        add_trace_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if processors:
        chain.extend(processors)
    chain.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=chain,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
