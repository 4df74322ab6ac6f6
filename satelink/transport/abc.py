"""
Transport interface.

A transport moves raw frame bytes between a TransportSession and one
module: an ETHM-1 over TCP or an INT-RS over RS-232. It knows nothing
about frames; reply assembly, timeouts per command and retries belong
to the session.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from satelink.exceptions import TimeoutError, TransportError

if TYPE_CHECKING:
    from types import TracebackType


class AbstractTransport(ABC):
    """
    Byte link to an integration module.

    Usable as an async context manager, which opens on entry and closes
    on exit::

        async with TcpTransport("192.168.1.112") as transport:
            await transport.write(frame)
            reply = await transport.read(1024)
    """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """True while the link is connected."""
        ...

    @property
    @abstractmethod
    def port_name(self) -> str:
        """Printable address, e.g. ``tcp://192.168.1.112:7094`` or ``/dev/ttyUSB0``."""
        ...

    @abstractmethod
    async def open(self, timeout: float | None = None) -> None:
        """
        Connect.

        Args:
            timeout: Connect timeout in seconds, None for the transport default.

        Raises:
            ConnectionError: If the link cannot be established.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Disconnect. Closing a closed transport does nothing."""
        ...

    @abstractmethod
    async def write(self, data: bytes) -> None:
        """
        Send bytes.

        Raises:
            TransportError: If the link is closed or the write fails.
        """
        ...

    @abstractmethod
    async def read(self, max_bytes: int, timeout: float | None = None) -> bytes:
        """
        Receive what is available, at most ``max_bytes``.

        Returns b"" once the peer has closed the link.

        Raises:
            TimeoutError: If no byte arrives within ``timeout``.
            TransportError: If the link is closed or the read fails.
        """
        ...

    def discard_buffers(self) -> None:
        """Drop unread input; a no-op unless the transport buffers itself."""

    async def __aenter__(self) -> AbstractTransport:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()


class StreamTransport(AbstractTransport):
    """
    Transport over an asyncio StreamReader/StreamWriter pair.

    Subclasses implement ``_connect`` and may widen ``io_errors`` with
    their library's exception types.
    """

    io_errors: ClassVar[tuple[type[BaseException], ...]] = (OSError,)

    def __init__(self, default_timeout: float) -> None:
        self._default_timeout = default_timeout
        self._reader: asyncio.StreamReader | None = None
        self._writer: asyncio.StreamWriter | None = None

    @abstractmethod
    async def _connect(self, timeout: float | None) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        """Establish the stream pair, raising ConnectionError on failure."""
        ...

    @property
    def is_open(self) -> bool:
        writer = self._writer
        return writer is not None and self._reader is not None and not writer.is_closing()

    async def open(self, timeout: float | None = None) -> None:
        if not self.is_open:
            self._reader, self._writer = await self._connect(timeout)

    async def close(self) -> None:
        writer, self._reader, self._writer = self._writer, None, None
        if writer is None:
            return
        writer.close()
        try:
            await writer.wait_closed()
        except self.io_errors:
            # already reset by the peer
            pass

    async def write(self, data: bytes) -> None:
        writer = self._open_writer()
        try:
            writer.write(data)
            await writer.drain()
        except self.io_errors as e:
            raise TransportError(f"Write to {self.port_name} failed: {e}") from e

    async def read(self, max_bytes: int, timeout: float | None = None) -> bytes:
        if not self.is_open:
            raise TransportError(f"{self.port_name} is not open")

        limit = self._default_timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(self._reader.read(max_bytes), timeout=limit)
        except asyncio.TimeoutError:
            raise TimeoutError(
                f"No reply from {self.port_name} within {limit:.1f}s",
                timeout_seconds=limit,
            ) from None
        except self.io_errors as e:
            raise TransportError(f"Read from {self.port_name} failed: {e}") from e

    def _open_writer(self) -> asyncio.StreamWriter:
        if not self.is_open:
            raise TransportError(f"{self.port_name} is not open")
        return self._writer

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.port_name!r}, {'open' if self.is_open else 'closed'})"
