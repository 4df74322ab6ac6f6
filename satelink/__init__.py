"""
satelink - Python library for the Satel INTEGRA ETHM-1 / INT-RS protocol.

This library provides async communication with INTEGRA alarm panels over
TCP (ETHM-1) or RS-232 serial (INT-RS), covering names, zone states, the
system clock, version information, command results and the event log.

Example:
    >>> from satelink import IntegraClient
    >>> from satelink.transport import TcpTransport
    >>>
    >>> async def main():
    ...     async with IntegraClient(TcpTransport("192.168.1.112")) as client:
    ...         status = await client.read_clock_status()
    ...         print(status.device_type, status.datetime_text)
"""

from satelink.catalog import EventCatalog
from satelink.client import IntegraClient
from satelink.config import SessionConfig
from satelink.exceptions import (
    BusyError,
    ChecksumMismatchError,
    ConnectionError,
    EmptyResponseError,
    FramingError,
    ParseError,
    ProtocolError,
    SatelinkError,
    TimeoutError,
    TransportError,
    UnknownOpcodeError,
    UnsupportedResultCodeError,
)
from satelink.log import LevelGate, gated_logger
from satelink.models.records import (
    CommandResult,
    DoorsReport,
    EventRecord,
    ModuleVersion,
    ObjectName,
    SystemStatus,
    VersionInfo,
    ZoneSet,
)
from satelink.protocol import Command, ObjectType, Opcode, Response
from satelink.session import TransportSession
from satelink.transport import AbstractTransport, AsyncSerialTransport, TcpTransport

__version__ = "0.1.0"
__all__ = [
    # Client
    "IntegraClient",
    "TransportSession",
    "SessionConfig",
    "EventCatalog",
    # Protocol
    "Command",
    "Response",
    "Opcode",
    "ObjectType",
    # Models
    "ObjectName",
    "ZoneSet",
    "DoorsReport",
    "SystemStatus",
    "ModuleVersion",
    "VersionInfo",
    "CommandResult",
    "EventRecord",
    # Exceptions
    "SatelinkError",
    "ProtocolError",
    "FramingError",
    "ChecksumMismatchError",
    "EmptyResponseError",
    "UnknownOpcodeError",
    "UnsupportedResultCodeError",
    "ParseError",
    "TimeoutError",
    "ConnectionError",
    "TransportError",
    "BusyError",
    # Logging
    "LevelGate",
    "gated_logger",
    # Transport
    "AbstractTransport",
    "AsyncSerialTransport",
    "TcpTransport",
    # Version
    "__version__",
]
