"""
TCP transport implementation.
"""

from exee.transport.tcp.factory import TcpTransportFactory
from exee.transport.tcp.transport import TcpTransport

__all__ = ["TcpTransport", "TcpTransportFactory"]
