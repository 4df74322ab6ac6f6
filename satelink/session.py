"""
Request/response session over a single transport.

One command is in flight at a time. For every command the session:

1. waits until the minimum spacing since the previous transmission passed,
2. opens the transport if needed,
3. writes the encoded frame,
4. reads until the FE 0D footer, the Busy sentinel, end of stream or the
   size cap,
5. closes the transport again unless the session is persistent; a
   persistent link is closed too when the exchange fails,
6. on "Busy!" waits a growing, capped delay and resubmits the same
   command, up to the configured number of retries.

All waits are ``asyncio.sleep`` calls, so cancelling the calling task
stops the session at any suspension point and releases the transport.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from satelink.config import SessionConfig
from satelink.exceptions import BusyError, EmptyResponseError
from satelink.protocol.constants import ProtocolConstants
from satelink.protocol.frame_codec import FrameCodec

if TYPE_CHECKING:
    from satelink.protocol.messages import Command, Response
    from satelink.transport.abc import AbstractTransport

# Module logger
logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Enforces a minimum interval between transmissions.

    The first call never waits.
    """

    def __init__(self, min_interval: float) -> None:
        self._min_interval = min_interval
        self._last_sent: float | None = None

    @property
    def min_interval(self) -> float:
        return self._min_interval

    async def wait(self) -> None:
        """Sleep until the next transmission is allowed, then claim the slot."""
        loop = asyncio.get_running_loop()
        if self._last_sent is not None:
            remaining = self._last_sent + self._min_interval - loop.time()
            if remaining > 0:
                await asyncio.sleep(remaining)
        self._last_sent = loop.time()


class BusyBackoff:
    """
    Capped exponential delays for resubmitting after a Busy reply.

    Example:
        >>> list(BusyBackoff(5.0, 2.0, 30.0, 4).delays())
        [5.0, 10.0, 20.0, 30.0]
    """

    def __init__(
        self,
        initial_delay: float,
        factor: float,
        max_delay: float,
        max_retries: int,
    ) -> None:
        self.initial_delay = initial_delay
        self.factor = factor
        self.max_delay = max_delay
        self.max_retries = max_retries

    @classmethod
    def from_config(cls, config: SessionConfig) -> BusyBackoff:
        return cls(
            initial_delay=config.busy_retry_delay,
            factor=config.busy_backoff_factor,
            max_delay=config.busy_max_delay,
            max_retries=config.busy_max_retries,
        )

    def delays(self):
        """Yield one delay per allowed retry."""
        delay = self.initial_delay
        for _ in range(self.max_retries):
            yield min(delay, self.max_delay)
            delay *= self.factor


class TransportSession:
    """
    Synchronous-discipline request/response session.

    Attributes:
        transport: The underlying transport.
        config: Session configuration.
        codec: Frame codec used for encoding and validation.

    Example:
        >>> session = TransportSession(TcpTransport("192.168.1.112"))
        >>> response = await session.send(Command(Opcode.PANEL_VERSION))
        >>> response.payload_hex
        '42...'
    """

    def __init__(
        self,
        transport: AbstractTransport,
        config: SessionConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._config = config or SessionConfig()
        self._log = logger or logging.getLogger(__name__)
        self._codec = FrameCodec(unstuff_inbound=self._config.unstuff_inbound)
        self._rate_limiter = RateLimiter(self._config.min_send_interval)
        self._backoff = BusyBackoff.from_config(self._config)
        self._lock = asyncio.Lock()
        self._busy_retries = 0

    @property
    def transport(self) -> AbstractTransport:
        return self._transport

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def codec(self) -> FrameCodec:
        return self._codec

    @property
    def logger(self) -> logging.Logger:
        return self._log

    @property
    def busy_retries(self) -> int:
        """Total number of Busy resubmissions made by this session."""
        return self._busy_retries

    async def send(self, command: Command) -> Response:
        """
        Send a command and return its validated response.

        Args:
            command: Command to send.

        Returns:
            The decoded Response frame.

        Raises:
            ConnectionError: If the transport cannot be opened.
            TimeoutError: If no reply arrives within the read timeout.
            TransportError: On I/O failure.
            BusyError: If the module stays busy past the retry budget.
            EmptyResponseError: If the module closes without replying.
            FramingError: If the reply frame is malformed.
            ChecksumMismatchError: If the reply checksum is wrong.
        """
        async with self._lock:
            frame = self._codec.encode(command)
            delays = self._backoff.delays()
            attempt = 0

            while True:
                attempt += 1
                reply = await self._exchange(frame)

                if not reply.startswith(ProtocolConstants.BUSY_SENTINEL):
                    break

                delay = next(delays, None)
                if delay is None:
                    self._log.error("Module busy, giving up after %d attempts", attempt)
                    raise BusyError(attempt)

                self._busy_retries += 1
                self._log.info("Module is busy, retrying %r in %.1f seconds", command, delay)
                await asyncio.sleep(delay)

            if not reply:
                self._log.error("No response received for %r", command)
                raise EmptyResponseError(f"No response received for {command!r}")

            self._log.debug("Response         : %s", _hex(reply))
            return self._codec.decode(reply)

    async def close(self) -> None:
        """Close the transport."""
        await self._transport.close()

    async def _exchange(self, frame: bytes) -> bytes:
        """Write one frame and collect the raw reply."""
        await self._rate_limiter.wait()

        if not self._transport.is_open:
            await self._transport.open(timeout=self._config.connect_timeout)
        elif self._config.persistent:
            # bytes nobody asked for
            self._transport.discard_buffers()

        completed = False
        try:
            self._log.debug("Sending message  : %s", _hex(frame))
            await self._transport.write(frame)
            reply = await self._read_reply()
            completed = True
            return reply
        finally:
            # a reply still in flight must not answer the next command
            if not completed or not self._config.persistent:
                await self._transport.close()

    async def _read_reply(self) -> bytes:
        """
        Accumulate reads until a complete frame or Busy sentinel is seen.
        """
        buffer = bytearray()
        limit = self._config.max_response_size

        while len(buffer) < limit:
            chunk = await self._transport.read(
                min(ProtocolConstants.READ_CHUNK_SIZE, limit - len(buffer)),
                timeout=self._config.read_timeout,
            )
            if not chunk:
                break
            buffer.extend(chunk)

            if buffer.startswith(ProtocolConstants.BUSY_SENTINEL):
                break
            if len(buffer) >= 4 and buffer.endswith(ProtocolConstants.FOOTER):
                break

        if len(buffer) >= limit:
            self._log.warning("Reply reached the %d byte limit and may be truncated", limit)

        return bytes(buffer)

    def __repr__(self) -> str:
        return f"TransportSession({self._transport.port_name!r}, persistent={self._config.persistent})"


def _hex(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)
