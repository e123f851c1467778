"""
Error hierarchy for the transport layer.

All transport errors derive from exee.errors.TransportError.
"""

from exee.errors import TransportError


class ConnectionError(TransportError):
    """Error establishing or maintaining a connection."""


class ConnectionTimeoutError(ConnectionError):
    """Connection attempt timed out."""


class ConnectionRefusedError(ConnectionError):
    """Connection was refused by the terminal."""


class ReadTimeoutError(TransportError):
    """No reply arrived before the read deadline."""


__all__ = [
    "TransportError",
    "ConnectionError",
    "ConnectionTimeoutError",
    "ConnectionRefusedError",
    "ReadTimeoutError",
]
