"""
Factory for TCP transports.
"""

from typing import Any

from exee.transport.tcp.transport import TcpTransport


class TcpTransportFactory:
    """Creates TcpTransport instances from default and per-call options."""

    def __init__(self, **defaults: Any):
        """
        Args:
            **defaults: Keyword arguments applied to every transport created,
                e.g. ``connect_timeout`` or ``max_bytes``.
        """
        self.defaults = defaults

    def create_transport(self, **kwargs: Any) -> TcpTransport:
        options = {**self.defaults, **kwargs}
        return TcpTransport(**options)
