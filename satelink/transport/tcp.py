"""
TCP transport for the ETHM-1 Ethernet module.

The ETHM-1 listens on its integration port (7094 by default). It serves
one client at a time and drops idle connections, which is why sessions
reconnect for every command unless told to stay connected.

Example:
    >>> transport = TcpTransport("192.168.1.112")
    >>> async with transport:
    ...     await transport.write(frame)
    ...     reply = await transport.read(1024, timeout=30.0)
"""

from __future__ import annotations

import asyncio

from satelink.exceptions import ConnectionError
from satelink.protocol.constants import ProtocolConstants
from satelink.transport.abc import StreamTransport


class TcpTransport(StreamTransport):
    """
    ETHM-1 link over an asyncio TCP stream.

    Attributes:
        host: Module address.
        port: Integration port.
    """

    def __init__(
        self,
        host: str,
        port: int = ProtocolConstants.DEFAULT_PORT,
        connect_timeout: float = ProtocolConstants.CONNECT_TIMEOUT,
        default_timeout: float = ProtocolConstants.READ_TIMEOUT,
    ) -> None:
        """
        Args:
            host: IP address or host name of the module.
            port: Integration port.
            connect_timeout: Connect timeout used when ``open`` gets none.
            default_timeout: Read timeout used when ``read`` gets none.
        """
        super().__init__(default_timeout)
        self._host = host
        self._port = port
        self._connect_timeout = connect_timeout

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def port_name(self) -> str:
        return f"tcp://{self._host}:{self._port}"

    async def _connect(self, timeout: float | None) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        limit = self._connect_timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(asyncio.open_connection(self._host, self._port), timeout=limit)
        except asyncio.TimeoutError:
            raise ConnectionError(f"Connecting to {self.port_name} timed out after {limit:.1f}s") from None
        except OSError as e:
            raise ConnectionError(f"Cannot connect to {self.port_name}: {e}") from e
