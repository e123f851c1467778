"""
Configuration helpers for exee.

Settings are resolved through a simple hierarchy: explicit arguments, then the
client's config mapping, then ``EXEE_*`` environment variables, then the
defaults defined here.
"""

import os
from typing import Any, Dict, Mapping, Optional, Tuple

from exee.errors import ConfigurationError

ENV_PREFIX = "EXEE_"

DEFAULT_URI = "localhost:80"
DEFAULT_PORT = 80
DEFAULT_TRANSACTION_ID = "General Transaction"

DEFAULTS: Dict[str, Any] = {
    "uri": DEFAULT_URI,
    "transaction_id": DEFAULT_TRANSACTION_ID,
    "timeout": None,
    "connect_timeout": 10.0,
    "read_timeout": 30.0,
    "encoding": "utf-8",
    "max_bytes": 65536,
}


def get_env_config(key: str) -> Optional[str]:
    """Get a configuration value from the environment.

    Args:
        key: The configuration key, e.g. ``"timeout"``

    Returns:
        The value of ``EXEE_<KEY>`` or None if it is not set
    """
    return os.environ.get(f"{ENV_PREFIX}{key.upper()}")


def merge_configs(*configs: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge configuration mappings, later mappings taking precedence."""
    merged: Dict[str, Any] = {}
    for config in configs:
        if config:
            merged.update(config)
    return merged


def parse_endpoint(uri: str) -> Tuple[str, int]:
    """Split a ``host:port`` endpoint into its parts.

    IPv6 literals must be bracketed (``[::1]:9000``). An endpoint without a
    port uses port 80.

    Args:
        uri: The endpoint string

    Returns:
        A ``(host, port)`` tuple

    Raises:
        ConfigurationError: If the endpoint is empty or the port is invalid
    """
    uri = (uri or "").strip()
    if "://" in uri:
        uri = uri.split("://", 1)[1]
    if not uri:
        raise ConfigurationError("Endpoint must not be empty")

    if uri.startswith("["):
        host, sep, rest = uri[1:].partition("]")
        if not sep:
            raise ConfigurationError(f"Unterminated IPv6 literal in endpoint: {uri}")
        port_str = rest[1:] if rest.startswith(":") else ""
        if rest and not rest.startswith(":"):
            raise ConfigurationError(f"Invalid endpoint: {uri}")
    elif uri.count(":") == 1:
        host, port_str = uri.split(":", 1)
    elif ":" in uri:
        raise ConfigurationError(f"IPv6 endpoints must be bracketed: {uri}")
    else:
        host, port_str = uri, ""

    if not host:
        raise ConfigurationError(f"Endpoint has no host: {uri}")
    if not port_str:
        return host, DEFAULT_PORT

    try:
        port = int(port_str)
    except ValueError as e:
        raise ConfigurationError(f"Invalid port in endpoint {uri!r}: {port_str}") from e
    if not 0 < port < 65536:
        raise ConfigurationError(f"Port out of range in endpoint {uri!r}: {port}")
    return host, port


def coerce_float(key: str, value: Any) -> Optional[float]:
    """Convert a configuration value to a float, keeping None as None."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value for {key}: {value!r}") from e


def coerce_int(key: str, value: Any) -> int:
    """Convert a configuration value to a positive integer."""
    try:
        result = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value for {key}: {value!r}") from e
    if result <= 0:
        raise ConfigurationError(f"Value for {key} must be positive: {value!r}")
    return result
