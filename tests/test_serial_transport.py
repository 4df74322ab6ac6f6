"""Tests for AsyncSerialTransport with the pyserial-asyncio opener replaced."""

import asyncio

import pytest
import serial

from satelink.exceptions import ConnectionError
from satelink.transport import serial_async
from satelink.transport.serial_async import AsyncSerialTransport


class FakePort:
    """Stands in for the serial.Serial behind a pyserial-asyncio transport."""

    def __init__(self):
        self.resets = []

    def reset_input_buffer(self):
        self.resets.append("input")

    def reset_output_buffer(self):
        self.resets.append("output")


class FakeWriter:
    def __init__(self, port):
        self.transport = type("FakeSerialTransport", (), {"serial": port})()
        self.closed = False

    def is_closing(self):
        return self.closed

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass


class TestAsyncSerialTransport:
    """Tests for AsyncSerialTransport."""

    @pytest.fixture
    def port(self):
        return FakePort()

    @pytest.fixture
    def opened_with(self, monkeypatch, port):
        """Record the line settings passed to pyserial-asyncio."""
        calls = []

        async def fake_open(**kwargs):
            calls.append(kwargs)
            return asyncio.StreamReader(), FakeWriter(port)

        monkeypatch.setattr(serial_async.serial_asyncio, "open_serial_connection", fake_open)
        return calls

    def test_defaults(self):
        transport = AsyncSerialTransport("/dev/ttyUSB0")
        assert transport.port_name == "/dev/ttyUSB0"
        assert transport.baudrate == 19200
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_open_uses_8n1(self, opened_with):
        """Test the INT-RS line settings."""
        transport = AsyncSerialTransport("/dev/ttyUSB0")
        await transport.open()

        assert transport.is_open
        settings = opened_with[0]
        assert settings["url"] == "/dev/ttyUSB0"
        assert settings["baudrate"] == 19200
        assert settings["bytesize"] == serial.EIGHTBITS
        assert settings["parity"] == serial.PARITY_NONE
        assert settings["stopbits"] == serial.STOPBITS_ONE
        assert settings["rtscts"] is False

        await transport.close()
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_discard_buffers_resets_port(self, opened_with, port):
        transport = AsyncSerialTransport("/dev/ttyUSB0")
        await transport.open()

        transport.discard_buffers()

        assert port.resets == ["input", "output"]
        await transport.close()

    @pytest.mark.asyncio
    async def test_open_times_out(self, monkeypatch):
        """Test the connect timeout applies to a port that never opens."""

        async def hang(**kwargs):
            await asyncio.Event().wait()

        monkeypatch.setattr(serial_async.serial_asyncio, "open_serial_connection", hang)
        transport = AsyncSerialTransport("/dev/ttyUSB0", connect_timeout=0.05)

        with pytest.raises(ConnectionError, match="timed out"):
            await transport.open()
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_explicit_open_timeout_wins(self, monkeypatch):
        async def hang(**kwargs):
            await asyncio.Event().wait()

        monkeypatch.setattr(serial_async.serial_asyncio, "open_serial_connection", hang)
        transport = AsyncSerialTransport("/dev/ttyUSB0", connect_timeout=60.0)

        with pytest.raises(ConnectionError):
            await asyncio.wait_for(transport.open(timeout=0.05), timeout=2.0)

    @pytest.mark.asyncio
    async def test_serial_exception_maps_to_connection_error(self, monkeypatch):
        async def fail(**kwargs):
            raise serial.SerialException("could not open port /dev/ttyUSB9")

        monkeypatch.setattr(serial_async.serial_asyncio, "open_serial_connection", fail)

        with pytest.raises(ConnectionError, match="ttyUSB9"):
            await AsyncSerialTransport("/dev/ttyUSB9").open()
