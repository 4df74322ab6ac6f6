"""Tests for TransportSession, RateLimiter and BusyBackoff."""

import asyncio
import logging

import pytest

from satelink import SessionConfig
from satelink.exceptions import (
    BusyError,
    ChecksumMismatchError,
    ConnectionError,
    EmptyResponseError,
    FramingError,
    TimeoutError,
)
from satelink.protocol import Command, ProtocolConstants
from satelink.session import BusyBackoff, RateLimiter, TransportSession
from satelink.transport.mock import MockTransport, ScriptedMockTransport

BUSY = ProtocolConstants.BUSY_SENTINEL
PANEL_VERSION = Command(0x7E)


class HangingTransport(MockTransport):
    """Mock transport whose reads never complete."""

    async def read(self, max_bytes, timeout=None):
        await asyncio.Event().wait()


class TestBusyBackoff:
    """Tests for the busy back-off schedule."""

    def test_default_schedule(self):
        """Test the default delays double up to the cap."""
        backoff = BusyBackoff.from_config(SessionConfig())
        assert list(backoff.delays()) == [5.0, 10.0, 20.0, 40.0, 60.0]

    def test_capped_schedule(self):
        """Test delays never exceed the cap."""
        assert list(BusyBackoff(5.0, 2.0, 30.0, 4).delays()) == [5.0, 10.0, 20.0, 30.0]

    def test_constant_schedule(self):
        """Test a factor of one gives a fixed delay."""
        backoff = BusyBackoff.from_config(SessionConfig.legacy())
        assert set(backoff.delays()) == {5.0}

    def test_no_retries(self):
        """Test zero retries yields nothing."""
        assert list(BusyBackoff(5.0, 2.0, 60.0, 0).delays()) == []


class TestRateLimiter:
    """Tests for the minimum send interval."""

    @pytest.mark.asyncio
    async def test_first_wait_is_immediate(self):
        """Test the first transmission never waits."""
        limiter = RateLimiter(10.0)
        await asyncio.wait_for(limiter.wait(), timeout=0.5)

    @pytest.mark.asyncio
    async def test_second_wait_is_spaced(self):
        """Test consecutive transmissions are spaced by the interval."""
        loop = asyncio.get_running_loop()
        limiter = RateLimiter(0.05)
        await limiter.wait()
        start = loop.time()
        await limiter.wait()
        assert loop.time() - start >= 0.04


class TestTransportSession:
    """Tests for TransportSession.send."""

    @pytest.fixture
    def transport(self):
        return MockTransport()

    @pytest.fixture
    def session(self, transport, fast_config):
        return TransportSession(transport, fast_config)

    @pytest.mark.asyncio
    async def test_send_returns_response(self, session, transport, make_frame):
        """Test a simple request/response exchange."""
        transport.add_response(make_frame(0xEF, b"\x00"))

        response = await session.send(Command(0xEF))

        assert response.opcode == 0xEF
        assert response.payload == b"\x00"
        transport.assert_written(bytes.fromhex("FEFEEFD8D1FE0D"))

    @pytest.mark.asyncio
    async def test_connection_per_command(self, session, transport, make_frame):
        """Test a non-persistent session opens and closes per command."""
        transport.add_responses(make_frame(0xEF, b"\x00"), make_frame(0xEF, b"\x00"))

        await session.send(Command(0xEF))
        await session.send(Command(0xEF))

        assert transport.open_count == 2
        assert transport.close_count == 2
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_persistent_session_keeps_connection(self, transport, fast_config, make_frame):
        """Test a persistent session opens once."""
        session = TransportSession(transport, fast_config.model_copy(update={"persistent": True}))
        transport.add_responses(make_frame(0xEF, b"\x00"), make_frame(0xEF, b"\x00"))

        await session.send(Command(0xEF))
        await session.send(Command(0xEF))

        assert transport.open_count == 1
        assert transport.is_open
        await session.close()
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_persistent_session_drops_stale_input(self, transport, fast_config, make_frame):
        """Test bytes left over on an open link are not taken as the next reply."""
        session = TransportSession(transport, fast_config.model_copy(update={"persistent": True}))
        await transport.open()
        transport.add_response(make_frame(0x7E, b"\x48"))
        await transport.read(2)
        transport.add_response(make_frame(0xEF, b"\x00"))

        response = await session.send(Command(0xEF))

        assert response.opcode == 0xEF
        assert response.payload == b"\x00"

    @pytest.mark.asyncio
    async def test_persistent_session_reconnects_after_timeout(self, transport, fast_config, make_frame):
        """Test a failed exchange drops the persistent link so a late reply cannot be read."""
        session = TransportSession(transport, fast_config.model_copy(update={"persistent": True}))

        with pytest.raises(TimeoutError):
            await session.send(PANEL_VERSION)
        assert not transport.is_open

        transport.add_response(make_frame(0xEF, b"\x00"))
        response = await session.send(Command(0xEF))

        assert response.opcode == 0xEF
        assert transport.open_count == 2
        assert transport.is_open

    @pytest.mark.asyncio
    async def test_persistent_session_closes_on_cancel(self, fast_config):
        """Test cancelling a persistent exchange releases the link."""
        transport = HangingTransport()
        session = TransportSession(transport, fast_config.model_copy(update={"persistent": True}))
        task = asyncio.create_task(session.send(PANEL_VERSION))
        await asyncio.sleep(0.01)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_busy_twice_then_success(self, session, transport, make_frame):
        """Test Busy replies cause exactly that many retransmissions."""
        transport.add_responses(BUSY, BUSY, make_frame(0x7E, b"\x48"))

        response = await session.send(PANEL_VERSION)

        assert response.opcode == 0x7E
        transport.assert_write_count(3)
        assert set(transport.written_data) == {session.codec.encode(PANEL_VERSION)}
        assert session.busy_retries == 2

    @pytest.mark.asyncio
    async def test_busy_exhaustion_raises(self, transport):
        """Test the retry budget is bounded."""
        config = SessionConfig(
            min_send_interval=0,
            busy_retry_delay=0,
            busy_max_delay=0,
            busy_max_retries=2,
        )
        session = TransportSession(transport, config)
        transport.add_responses(BUSY, BUSY, BUSY)

        with pytest.raises(BusyError) as exc_info:
            await session.send(PANEL_VERSION)

        assert exc_info.value.attempts == 3
        transport.assert_write_count(3)
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_busy_delay_is_awaited(self, transport, make_frame):
        """Test the session sleeps between Busy retries."""
        config = SessionConfig(min_send_interval=0, busy_retry_delay=0.05, busy_max_delay=0.05)
        session = TransportSession(transport, config)
        transport.add_responses(BUSY, make_frame(0x7E))
        loop = asyncio.get_running_loop()

        start = loop.time()
        await session.send(PANEL_VERSION)

        assert loop.time() - start >= 0.04

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self, session, transport):
        """Test the peer closing without data."""
        transport.add_response(b"")

        with pytest.raises(EmptyResponseError):
            await session.send(PANEL_VERSION)
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_timeout_closes_transport(self, session, transport):
        """Test a read timeout propagates and releases the connection."""
        with pytest.raises(TimeoutError):
            await session.send(PANEL_VERSION)
        assert not transport.is_open
        assert transport.close_count == 1

    @pytest.mark.asyncio
    async def test_connect_failure_propagates(self, session, transport):
        """Test connection errors are not swallowed."""
        transport.fail_next_open(ConnectionError("refused"))

        with pytest.raises(ConnectionError):
            await session.send(PANEL_VERSION)
        transport.assert_write_count(0)

    @pytest.mark.asyncio
    async def test_checksum_error_propagates(self, session, transport):
        """Test a corrupt reply raises ChecksumMismatchError."""
        transport.add_response(bytes.fromhex("FEFE7ED861FE0D"))

        with pytest.raises(ChecksumMismatchError):
            await session.send(PANEL_VERSION)

    @pytest.mark.asyncio
    async def test_reply_split_across_reads(self, session, transport, make_frame):
        """Test the session keeps reading until the footer."""
        frame = make_frame(0x7C, b"12320120527\x01")
        transport.add_responses(frame[:5], frame[5:])

        response = await session.send(Command(0x7C))

        assert response.payload == b"12320120527\x01"

    @pytest.mark.asyncio
    async def test_reply_size_cap(self, transport):
        """Test replies are cut at max_response_size."""
        config = SessionConfig(min_send_interval=0, max_response_size=16)
        session = TransportSession(transport, config)
        transport.add_response(b"\xfe\xfe" + b"\x00" * 30)

        with pytest.raises(FramingError):
            await session.send(PANEL_VERSION)

    @pytest.mark.asyncio
    async def test_session_usable_after_error(self, session, transport, make_frame):
        """Test a failed exchange leaves the session usable."""
        transport.add_response(bytes.fromhex("FEFE7ED861FE0D"))
        with pytest.raises(ChecksumMismatchError):
            await session.send(PANEL_VERSION)

        transport.add_response(make_frame(0x7E))
        response = await session.send(PANEL_VERSION)
        assert response.opcode == 0x7E

    @pytest.mark.asyncio
    async def test_cancellation_closes_transport(self, fast_config):
        """Test cancelling a send mid-read releases the connection."""
        transport = HangingTransport()
        session = TransportSession(transport, fast_config)

        task = asyncio.create_task(session.send(PANEL_VERSION))
        while not transport.written_data:
            await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert not transport.is_open
        assert transport.close_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_callers_are_serialised(self, fast_config, request_frame, make_frame):
        """Test two callers never interleave on the link."""
        transport = ScriptedMockTransport()
        transport.expect(make_frame(0x7E, b"\x01"), request=request_frame(0x7E))
        transport.expect(make_frame(0x7C, b"\x02"), request=request_frame(0x7C))
        session = TransportSession(transport, fast_config)

        first, second = await asyncio.gather(
            session.send(Command(0x7E)),
            session.send(Command(0x7C)),
        )

        assert first.payload == b"\x01"
        assert second.payload == b"\x02"
        assert transport.script_complete

    @pytest.mark.asyncio
    async def test_explicit_logger_receives_frames(self, session, transport, make_frame, caplog):
        """Test frame dumps are logged at DEBUG."""
        logger = logging.getLogger("satelink.test.session")
        session = TransportSession(transport, session.config, logger=logger)
        transport.add_response(make_frame(0x7E))

        with caplog.at_level(logging.DEBUG, logger="satelink.test.session"):
            await session.send(PANEL_VERSION)

        messages = [r.getMessage() for r in caplog.records if r.name == "satelink.test.session"]
        assert any("FE FE 7E D8 60 FE 0D" in m for m in messages)

    def test_repr(self, session):
        """Test string representation."""
        assert "mock://test" in repr(session)
