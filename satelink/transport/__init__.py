"""
Transport layer for INTEGRA protocol communication.

This package provides transport implementations for communicating with
ETHM-1 and INT-RS modules.

Available transports:
- TcpTransport: ETHM-1 over TCP (asyncio streams)
- AsyncSerialTransport: INT-RS over RS-232 using pyserial-asyncio
- MockTransport: Mock transport for testing without hardware

Example:
    >>> from satelink.transport import TcpTransport
    >>> async with TcpTransport("192.168.1.112") as transport:
    ...     await transport.write(frame_data)
    ...     response = await transport.read(1024)
"""

from satelink.transport.abc import AbstractTransport, StreamTransport
from satelink.transport.mock import MockTransport, ScriptedMockTransport
from satelink.transport.serial_async import AsyncSerialTransport
from satelink.transport.tcp import TcpTransport

__all__ = [
    "AbstractTransport",
    "AsyncSerialTransport",
    "MockTransport",
    "ScriptedMockTransport",
    "StreamTransport",
    "TcpTransport",
]
