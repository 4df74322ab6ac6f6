"""
Serial transport for the INT-RS module, built on pyserial-asyncio.

The INT-RS speaks the same frames as the ETHM-1 over RS-232 at 19200
baud, 8 data bits, no parity, 1 stop bit and no flow control. Pair it
with ``SessionConfig(persistent=True)`` to keep the line open between
commands.

Example:
    >>> transport = AsyncSerialTransport("/dev/ttyUSB0")
    >>> async with transport:
    ...     await transport.write(frame)
    ...     reply = await transport.read(1024)
"""

from __future__ import annotations

import asyncio

import serial
import serial_asyncio

from satelink.exceptions import ConnectionError
from satelink.protocol.constants import ProtocolConstants
from satelink.transport.abc import StreamTransport


class AsyncSerialTransport(StreamTransport):
    """
    INT-RS link over a pyserial-asyncio stream.

    Attributes:
        port_name: Serial device, e.g. ``/dev/ttyUSB0`` or ``COM3``.
        baudrate: Line speed.
    """

    io_errors = (OSError, serial.SerialException)

    def __init__(
        self,
        port: str,
        baudrate: int = ProtocolConstants.DEFAULT_BAUD_RATE,
        connect_timeout: float = ProtocolConstants.CONNECT_TIMEOUT,
        default_timeout: float = ProtocolConstants.READ_TIMEOUT,
    ) -> None:
        super().__init__(default_timeout)
        self._port = port
        self._baudrate = baudrate
        self._connect_timeout = connect_timeout
        self._serial: serial.Serial | None = None

    @property
    def port_name(self) -> str:
        return self._port

    @property
    def baudrate(self) -> int:
        return self._baudrate

    async def _connect(self, timeout: float | None) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        limit = self._connect_timeout if timeout is None else timeout
        opening = serial_asyncio.open_serial_connection(
            url=self._port,
            baudrate=self._baudrate,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            xonxoff=False,
            rtscts=False,
        )
        try:
            reader, writer = await asyncio.wait_for(opening, timeout=limit)
        except asyncio.TimeoutError:
            raise ConnectionError(f"Opening serial port {self._port} timed out after {limit:.1f}s") from None
        except (OSError, serial.SerialException) as e:
            raise ConnectionError(f"Cannot open serial port {self._port}: {e}") from e

        self._serial = getattr(writer.transport, "serial", None)
        return reader, writer

    async def close(self) -> None:
        self._serial = None
        await super().close()

    def discard_buffers(self) -> None:
        """Reset the port's input and output buffers (not the asyncio buffer)."""
        if self._serial is None:
            return
        try:
            self._serial.reset_input_buffer()
            self._serial.reset_output_buffer()
        except (OSError, serial.SerialException):
            # port already gone
            pass
