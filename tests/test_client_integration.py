"""
End-to-end tests pushing transactions to a local terminal listener.
"""

import anyio
import pytest

from exee import AttributeModel, Client
from exee.errors import TransportError
from exee.transport.errors import ConnectionRefusedError
from exee.types import TransactionTypes
from tests.conftest import terminal_server, unused_port


class Sale(AttributeModel):
    required_fields = ("AMOUNT",)


@pytest.mark.anyio
async def test_push_sale_to_terminal():
    received = []

    async def handler(stream):
        async with stream:
            received.append(await stream.receive())
            await stream.send(b'0,"APPROVED"99,""')

    async with terminal_server(handler) as port:
        client = Client(f"127.0.0.1:{port}")
        client.set_transaction_type(TransactionTypes.SALE_TRANSACTION)
        client.with_model(Sale(AMOUNT="10.00", ID="123"))
        response = await client.push(timeout=5)

    assert response == b'0,"APPROVED"99,""'
    assert received == [
        b'0,"CCR1"AMOUNT,"10.00"CUSTOMER_TRANSACTION_ID,"Sale Transaction"ID,"123"99,""'
    ]


@pytest.mark.anyio
async def test_connection_closed_only_after_reply():
    """The client keeps the connection open until the reply arrives."""
    closed_before_reply = []

    async def handler(stream):
        async with stream:
            await stream.receive()
            await anyio.sleep(0.2)
            try:
                await stream.send(b"LATE REPLY")
            except anyio.BrokenResourceError:
                closed_before_reply.append(True)

    async with terminal_server(handler) as port:
        client = Client(f"127.0.0.1:{port}")
        response = await client.push(timeout=5)

    assert response == b"LATE REPLY"
    assert closed_before_reply == []


@pytest.mark.anyio
async def test_push_to_refused_endpoint():
    client = Client(f"127.0.0.1:{unused_port()}")
    client.add_transaction_fields({"AMOUNT": "10.00"})

    with pytest.raises(TransportError) as exc_info:
        await client.push()

    assert isinstance(exc_info.value, ConnectionRefusedError)

