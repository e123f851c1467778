"""
Protocol definitions for terminal transports.
"""

from collections.abc import AsyncIterator
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", bound="Transport")


@runtime_checkable
class Transport(Protocol):
    """Protocol defining the interface for a single-use terminal connection."""

    async def connect(self) -> None:
        """Establish the connection.

        Raises:
            ConnectionError: If the connection cannot be established.
            ConnectionTimeoutError: If the connection attempt times out.
        """
        ...

    async def disconnect(self) -> None:
        """Close the connection. Safe to call more than once."""
        ...

    async def send(self, data: bytes) -> None:
        """Write data to the connection.

        Raises:
            ConnectionError: If the connection is closed or broken.
        """
        ...

    def receive(self) -> AsyncIterator[bytes]:
        """Yield the reply received from the terminal.

        Raises:
            ConnectionError: If the connection is closed or broken.
            ReadTimeoutError: If no reply arrives in time.
        """
        ...

    async def __aenter__(self: T) -> T:
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        ...
