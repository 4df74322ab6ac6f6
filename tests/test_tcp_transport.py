"""Tests for TcpTransport against a loopback asyncio server."""

import asyncio

import pytest
import pytest_asyncio

from satelink import SessionConfig
from satelink.exceptions import ConnectionError, TimeoutError, TransportError
from satelink.protocol import Command
from satelink.session import TransportSession
from satelink.transport.tcp import TcpTransport


@pytest_asyncio.fixture
async def echo_server():
    """Server that answers every chunk with the same bytes."""

    async def handle(reader, writer):
        while data := await reader.read(1024):
            writer.write(data)
            await writer.drain()
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    yield server
    server.close()
    await server.wait_closed()


@pytest_asyncio.fixture
async def silent_server():
    """Server that accepts and never answers."""
    writers = []

    async def handle(reader, writer):
        writers.append(writer)

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    yield server
    for writer in writers:
        writer.close()
    server.close()
    await server.wait_closed()


def port_of(server):
    return server.sockets[0].getsockname()[1]


class TestTcpTransport:
    """Tests for TcpTransport."""

    def test_port_name(self):
        transport = TcpTransport("192.168.1.112")
        assert transport.port_name == "tcp://192.168.1.112:7094"
        assert transport.port == 7094
        assert not transport.is_open
        assert repr(transport) == "TcpTransport('tcp://192.168.1.112:7094', closed)"

    @pytest.mark.asyncio
    async def test_round_trip(self, echo_server):
        async with TcpTransport("127.0.0.1", port_of(echo_server)) as transport:
            assert transport.is_open
            await transport.write(b"\xfe\xfe\x7e\xd8\x60\xfe\x0d")
            reply = await transport.read(1024, timeout=2.0)
            assert reply == b"\xfe\xfe\x7e\xd8\x60\xfe\x0d"
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_open_twice_keeps_connection(self, echo_server):
        transport = TcpTransport("127.0.0.1", port_of(echo_server))
        await transport.open()
        writer = transport._writer
        await transport.open()
        assert transport._writer is writer
        await transport.close()

    @pytest.mark.asyncio
    async def test_read_timeout(self, silent_server):
        async with TcpTransport("127.0.0.1", port_of(silent_server)) as transport:
            with pytest.raises(TimeoutError) as exc_info:
                await transport.read(1024, timeout=0.05)
            assert exc_info.value.timeout_seconds == 0.05

    @pytest.mark.asyncio
    async def test_refused_connection(self):
        server = await asyncio.start_server(lambda r, w: None, "127.0.0.1", 0)
        port = port_of(server)
        server.close()
        await server.wait_closed()

        with pytest.raises(ConnectionError):
            await TcpTransport("127.0.0.1", port).open(timeout=1.0)

    @pytest.mark.asyncio
    async def test_io_on_closed_transport(self):
        transport = TcpTransport("127.0.0.1")
        with pytest.raises(TransportError):
            await transport.write(b"\x00")
        with pytest.raises(TransportError):
            await transport.read(1)

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        transport = TcpTransport("127.0.0.1")
        await transport.close()
        await transport.close()
        assert not transport.is_open


class TestPersistentSessionOverTcp:
    """Tests for a persistent session recovering from a late reply."""

    @pytest.mark.asyncio
    async def test_late_reply_is_not_taken_for_next_command(self, codec):
        """Test a reply arriving after a timeout does not answer the following command."""
        connections = []

        async def handle(reader, writer):
            connections.append(writer)
            try:
                while request := await reader.read(64):
                    if request[2] == 0x7E:
                        await asyncio.sleep(0.3)
                        writer.write(codec.encode(Command(0x7E, b"HSTALE")))
                    else:
                        writer.write(codec.encode(Command(0xEF, b"\x00")))
                    await writer.drain()
            except OSError:
                pass
            finally:
                writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        config = SessionConfig(
            min_send_interval=0,
            busy_retry_delay=0,
            busy_max_delay=0,
            read_timeout=0.1,
            persistent=True,
        )
        session = TransportSession(TcpTransport("127.0.0.1", port_of(server)), config)
        try:
            with pytest.raises(TimeoutError):
                await session.send(Command(0x7E))
            assert not session.transport.is_open

            await asyncio.sleep(0.4)
            response = await session.send(Command(0xEF))

            assert response.opcode == 0xEF
            assert response.payload == b"\x00"
            assert len(connections) == 2
        finally:
            await session.close()
            server.close()
            await server.wait_closed()
