"""
Factory protocol for creating transports.
"""

from typing import Any, Protocol, runtime_checkable

from exee.transport.protocol import Transport


@runtime_checkable
class TransportFactory(Protocol):
    """Protocol for transport factories."""

    def create_transport(self, **kwargs: Any) -> Transport:
        """Create a new transport instance.

        Args:
            **kwargs: Transport-specific configuration options.

        Returns:
            A new, unconnected transport instance.
        """
        ...
