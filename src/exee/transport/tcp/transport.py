"""
Plain TCP transport for transaction terminals.

The terminal protocol is single shot: connect, write the transaction once,
read the first reply chunk, close.
"""

import builtins
from collections.abc import AsyncIterator
from typing import Optional

import anyio
from anyio.abc import SocketStream

from exee.transport.errors import (
    ConnectionError,
    ConnectionRefusedError,
    ConnectionTimeoutError,
    ReadTimeoutError,
)


def _is_refused(exc: BaseException) -> bool:
    """Check whether a connect failure was a refusal on every address tried."""
    if isinstance(exc, builtins.ConnectionRefusedError):
        return True
    cause = exc.__cause__
    if cause is None:
        return False
    attempts = getattr(cause, "exceptions", None)
    if attempts is not None:
        return bool(attempts) and all(_is_refused(attempt) for attempt in attempts)
    return _is_refused(cause)


class TcpTransport:
    """Transport that talks to a terminal over a raw TCP stream."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 80,
        connect_timeout: Optional[float] = 10.0,
        read_timeout: Optional[float] = 30.0,
        max_bytes: int = 65536,
    ):
        """Initialize the transport.

        Args:
            host: The terminal host name or address.
            port: The terminal port.
            connect_timeout: Seconds allowed for the connection attempt, or None.
            read_timeout: Seconds allowed for the reply to arrive, or None.
            max_bytes: Largest reply chunk accepted in one read.
        """
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.max_bytes = max_bytes
        self._stream: Optional[SocketStream] = None

    @property
    def connected(self) -> bool:
        return self._stream is not None

    async def connect(self) -> None:
        """Open the TCP connection.

        Raises:
            ConnectionRefusedError: If the terminal refuses the connection.
            ConnectionTimeoutError: If the attempt exceeds ``connect_timeout``.
            ConnectionError: For any other socket failure.
        """
        if self._stream is not None:
            return

        try:
            with anyio.fail_after(self.connect_timeout):
                self._stream = await anyio.connect_tcp(self.host, self.port)
        except builtins.TimeoutError as e:
            raise ConnectionTimeoutError(
                f"Connection to {self.host}:{self.port} timed out "
                f"after {self.connect_timeout} seconds"
            ) from e
        except OSError as e:
            if _is_refused(e):
                raise ConnectionRefusedError(
                    f"Connection refused by {self.host}:{self.port}"
                ) from e
            raise ConnectionError(
                f"Failed to connect to {self.host}:{self.port}: {e}"
            ) from e

    async def disconnect(self) -> None:
        """Close the connection if it is open."""
        stream, self._stream = self._stream, None
        if stream is not None:
            await stream.aclose()

    async def send(self, data: bytes) -> None:
        """Write the whole payload to the terminal.

        Raises:
            ConnectionError: If the connection is not open or breaks.
        """
        if self._stream is None:
            raise ConnectionError("Transport is not connected")

        try:
            await self._stream.send(data)
        except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as e:
            raise ConnectionError(f"Failed to write to {self.host}:{self.port}: {e}") from e

    async def receive(self) -> AsyncIterator[bytes]:
        """Yield the first chunk the terminal sends back.

        Nothing is yielded when the terminal closes without replying.

        Raises:
            ConnectionError: If the connection is not open or breaks.
            ReadTimeoutError: If nothing arrives within ``read_timeout``.
        """
        if self._stream is None:
            raise ConnectionError("Transport is not connected")

        try:
            with anyio.fail_after(self.read_timeout):
                data = await self._stream.receive(self.max_bytes)
        except anyio.EndOfStream:
            return
        except builtins.TimeoutError as e:
            raise ReadTimeoutError(
                f"No reply from {self.host}:{self.port} "
                f"within {self.read_timeout} seconds"
            ) from e
        except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as e:
            raise ConnectionError(f"Failed to read from {self.host}:{self.port}: {e}") from e

        yield data

    async def __aenter__(self) -> "TcpTransport":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()
