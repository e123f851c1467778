"""
Pytest configuration for exee tests.

This module contains fixtures and configuration for pytest.
"""

import socket
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import anyio
import pytest
from anyio.abc import SocketAttribute

from exee.model import AttributeModel
from exee.transport.protocol import Transport
from exee.transport.registry import get_transport_factory_registry


# Mock Transport Protocol implementation
class MockTransport(Transport):
    """Mock transport for testing."""

    def __init__(self, responses=None, raise_on_connect=None, raise_on_send=None):
        self.responses = [b"mock response"] if responses is None else responses
        self.raise_on_connect = raise_on_connect
        self.raise_on_send = raise_on_send
        self.connected = False
        self.sent_data = []
        self.events = []
        self.connect_count = 0
        self.disconnect_count = 0
        self.send_count = 0

    async def connect(self) -> None:
        self.connect_count += 1
        self.events.append("connect")
        if self.raise_on_connect:
            raise self.raise_on_connect
        self.connected = True

    async def disconnect(self) -> None:
        self.disconnect_count += 1
        self.events.append("disconnect")
        self.connected = False

    async def send(self, data: bytes) -> None:
        self.send_count += 1
        self.events.append("send")
        if self.raise_on_send:
            raise self.raise_on_send
        self.sent_data.append(data)

    async def receive(self) -> AsyncGenerator[bytes, None]:
        self.events.append("receive")
        for response in self.responses:
            yield response

    async def __aenter__(self) -> "MockTransport":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()


# Mock Transport Factory
class MockTransportFactory:
    """Mock transport factory for testing."""

    def __init__(self, transport=None):
        self.transport = transport or MockTransport()
        self.create_count = 0
        self.last_kwargs = None

    def create_transport(self, **kwargs) -> Transport:
        self.create_count += 1
        self.last_kwargs = kwargs
        return self.transport


class SaleModel(AttributeModel):
    """Model requiring an amount and an id."""

    required_fields = ("AMOUNT", "ID")


@pytest.fixture
def mock_transport():
    """Fixture providing a mock transport."""
    return MockTransport()


@pytest.fixture
def mock_transport_factory(mock_transport):
    """Fixture providing a mock transport factory."""
    return MockTransportFactory(mock_transport)


@pytest.fixture
def register_mock_transport_factory(mock_transport_factory):
    """Fixture that registers a mock transport factory."""
    registry = get_transport_factory_registry()
    registry.register("mock", mock_transport_factory)
    yield
    registry.unregister("mock")


@pytest.fixture
def sale_model():
    """Fixture providing a valid sale model."""
    return SaleModel(AMOUNT="10.00", ID="123")


# Mock Telemetry
@pytest.fixture
def mock_telemetry(monkeypatch):
    """Fixture providing mock telemetry components."""
    mock_tracer = MagicMock()
    mock_span = MagicMock()
    mock_span.__enter__.return_value = mock_span
    mock_tracer.start_as_current_span.return_value = mock_span
    mock_tracer.start_span.return_value = mock_span

    mock_logger = MagicMock()

    mock_get_telemetry = MagicMock(return_value=(mock_tracer, mock_logger))
    monkeypatch.setattr("exee.client.get_telemetry", mock_get_telemetry)

    return mock_tracer, mock_logger


# Anyio Backend Selection - only use asyncio
@pytest.fixture(params=["asyncio"])
def anyio_backend(request):
    """Fixture to run tests with different anyio backends."""
    return request.param


def unused_port() -> int:
    """Find a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@asynccontextmanager
async def terminal_server(handler):
    """Run a TCP listener on a free local port for the duration of the block."""
    listener = await anyio.create_tcp_listener(local_host="127.0.0.1")
    port = listener.extra(SocketAttribute.local_port)
    async with anyio.create_task_group() as tg:
        tg.start_soon(listener.serve, handler)
        try:
            yield port
        finally:
            tg.cancel_scope.cancel()
