"""
Transport layer for exee.

A transport carries one encoded transaction to the terminal and brings back
the first reply chunk. Transports are created per push by a registered
factory and are never reused.
"""

from exee.transport.errors import (
    ConnectionError,
    ConnectionRefusedError,
    ConnectionTimeoutError,
    ReadTimeoutError,
    TransportError,
)
from exee.transport.factory import TransportFactory
from exee.transport.protocol import Transport
from exee.transport.registry import (
    TransportFactoryRegistry,
    get_transport_factory_registry,
)
from exee.transport.tcp import TcpTransport, TcpTransportFactory

__all__ = [
    "Transport",
    "TransportFactory",
    "TransportFactoryRegistry",
    "get_transport_factory_registry",
    "TcpTransport",
    "TcpTransportFactory",
    "TransportError",
    "ConnectionError",
    "ConnectionTimeoutError",
    "ConnectionRefusedError",
    "ReadTimeoutError",
]
