"""
INTEGRA panel client.

This module provides the high-level interface for talking to a Satel
INTEGRA panel through an ETHM-1 (TCP) or INT-RS (serial) module.

Every read goes through the same path:
    command -> TransportSession.send -> ResponseDispatcher -> decoder -> model

Example:
    >>> from satelink import IntegraClient
    >>> from satelink.transport import TcpTransport
    >>>
    >>> async def main():
    ...     async with IntegraClient(TcpTransport("192.168.1.112")) as client:
    ...         version = await client.read_panel_version()
    ...         print(version.device_type, version.version)
    ...         async for event in client.iter_events(limit=10):
    ...             print(event.date_text, event.time_text, event.text)
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING, Any, TypeVar

from satelink.catalog import EventCatalog
from satelink.config import SessionConfig
from satelink.decoders.registry import ResponseDispatcher, create_default_dispatcher
from satelink.exceptions import ProtocolError
from satelink.models.records import (
    DoorsReport,
    EventRecord,
    ModuleVersion,
    ObjectName,
    SystemStatus,
    VersionInfo,
    ZoneSet,
)
from satelink.protocol.constants import ZONE_BITMAP_OPCODES, ObjectType, Opcode, ProtocolConstants
from satelink.protocol.messages import Command
from satelink.session import TransportSession

if TYPE_CHECKING:
    from satelink.transport.abc import AbstractTransport

# Module logger
logger = logging.getLogger(__name__)

T = TypeVar("T")

_EVENT_INDEX = re.compile(r"^[0-9A-Fa-f]{6}$")


class IntegraClient:
    """
    Client for reading state, versions and events from an INTEGRA panel.

    Attributes:
        session: The request/response session.
        config: Session configuration.
        catalog: Event catalog used to describe event records.
        dispatcher: Opcode -> decoder dispatch table.

    Example:
        >>> client = IntegraClient(TcpTransport("192.168.1.112"))
        >>> zones = await client.read_violated_zones()
        >>> for number, name in zones.zones.items():
        ...     print(number, name)
        >>> await client.close()
    """

    def __init__(
        self,
        transport: AbstractTransport,
        config: SessionConfig | None = None,
        catalog: EventCatalog | None = None,
        dispatcher: ResponseDispatcher | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            transport: Transport to the ETHM-1 / INT-RS module.
            config: Session configuration (defaults if omitted).
            catalog: Event catalog (bundled catalog if omitted).
            dispatcher: Decoder dispatch (built-in decoders if omitted).
            logger: Logger for session traffic (module logger if omitted).
        """
        self._session = TransportSession(transport, config, logger)
        self._catalog = catalog if catalog is not None else EventCatalog.default()
        self._dispatcher = dispatcher or create_default_dispatcher()

    @property
    def session(self) -> TransportSession:
        return self._session

    @property
    def config(self) -> SessionConfig:
        return self._session.config

    @property
    def catalog(self) -> EventCatalog:
        return self._catalog

    @property
    def dispatcher(self) -> ResponseDispatcher:
        return self._dispatcher

    @property
    def transport(self) -> AbstractTransport:
        """Get the underlying transport."""
        return self._session.transport

    async def send(self, command: Command) -> Any:
        """
        Send a command and decode its reply.

        Args:
            command: Command to send.

        Returns:
            The decoded result model for the reply opcode.

        Raises:
            UnknownOpcodeError: If the reply opcode has no decoder.
            SatelinkError: Any transport, framing or parse failure.
        """
        response = await self._session.send(command)
        return await self._dispatcher.dispatch(response, self)

    # =========================================================================
    # Names
    # =========================================================================

    async def read_object_name(self, object_type: ObjectType | int, number: int) -> ObjectName:
        """
        Read the name of a partition, zone, user, expander or output.

        Args:
            object_type: Object-type selector.
            number: Object number (one byte).

        Returns:
            ObjectName for the object.
        """
        command = Command.build(Opcode.READ_NAME, int(object_type), number)
        return self._expect(await self.send(command), ObjectName, command)

    # =========================================================================
    # Zones and doors
    # =========================================================================

    async def read_zones(self, opcode: Opcode | int = Opcode.ZONES_VIOLATION) -> ZoneSet:
        """
        Read a zone state bitmap and resolve the names of flagged zones.

        Args:
            opcode: One of the zone report opcodes (0x00-0x08).

        Returns:
            ZoneSet mapping zone number to name.

        Raises:
            ValueError: If opcode is not a zone report.
        """
        if opcode not in ZONE_BITMAP_OPCODES:
            raise ValueError(f"Not a zone report opcode: 0x{int(opcode):02X}")
        command = Command(opcode)
        return self._expect(await self.send(command), ZoneSet, command)

    async def read_violated_zones(self) -> ZoneSet:
        return await self.read_zones(Opcode.ZONES_VIOLATION)

    async def read_tampered_zones(self) -> ZoneSet:
        return await self.read_zones(Opcode.ZONES_TAMPER)

    async def read_alarmed_zones(self) -> ZoneSet:
        return await self.read_zones(Opcode.ZONES_ALARM)

    async def read_bypassed_zones(self) -> ZoneSet:
        return await self.read_zones(Opcode.ZONES_BYPASS)

    async def read_doors_opened(self, long: bool = False) -> DoorsReport:
        """Read the opened (or opened long) doors report."""
        command = Command(Opcode.DOORS_OPENED_LONG if long else Opcode.DOORS_OPENED)
        return self._expect(await self.send(command), DoorsReport, command)

    # =========================================================================
    # System
    # =========================================================================

    async def read_clock_status(self) -> SystemStatus:
        """Read the panel clock and basic system status."""
        command = Command(Opcode.CLOCK_AND_STATUS)
        return self._expect(await self.send(command), SystemStatus, command)

    async def read_module_version(self) -> ModuleVersion:
        """
        Read the ETHM-1 / INT-RS module version.

        Modules older than 2013-11-08 never answer this command, so expect
        a TimeoutError from them.
        """
        command = Command(Opcode.MODULE_VERSION)
        return self._expect(await self.send(command), ModuleVersion, command)

    async def read_panel_version(self) -> VersionInfo:
        """Read the INTEGRA type and firmware version."""
        command = Command(Opcode.PANEL_VERSION)
        return self._expect(await self.send(command), VersionInfo, command)

    # =========================================================================
    # Events
    # =========================================================================

    async def read_event(self, index: str = ProtocolConstants.LATEST_EVENT_INDEX) -> EventRecord:
        """
        Read one event-log record.

        Args:
            index: Event index as 6 hex digits; ``FFFFFF`` reads the most
                recent event.

        Returns:
            EventRecord.

        Raises:
            ValueError: If index is not 6 hex digits.
        """
        if not _EVENT_INDEX.match(index):
            raise ValueError(f"Event index must be 6 hex digits, got {index!r}")
        command = Command(Opcode.READ_EVENT, bytes.fromhex(index))
        return self._expect(await self.send(command), EventRecord, command)

    async def iter_events(self, limit: int | None = None) -> AsyncGenerator[EventRecord, None]:
        """
        Walk the event log from the most recent record backwards.

        Each record's index is used to request the one before it. Iteration
        stops at the first empty record, when the panel repeats an index,
        or after ``limit`` records.

        Args:
            limit: Maximum number of records to yield.

        Yields:
            EventRecord, newest first.
        """
        index = ProtocolConstants.LATEST_EVENT_INDEX
        seen: set[str] = set()
        count = 0

        while limit is None or count < limit:
            record = await self.read_event(index)
            if not record.not_empty:
                logger.debug("Event log exhausted at index %s", index)
                return
            if record.index in seen:
                logger.warning("Event index %s repeated, stopping", record.index)
                return

            seen.add(record.index)
            count += 1
            yield record
            if record.index is None:
                logger.warning("Event record without index, cannot page further")
                return
            index = record.index

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Close the transport."""
        await self._session.close()

    async def __aenter__(self) -> IntegraClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _expect(self, result: Any, expected: type[T], command: Command) -> T:
        if not isinstance(result, expected):
            raise ProtocolError(
                f"Unexpected reply to {command!r}: {type(result).__name__} "
                f"instead of {expected.__name__}"
            )
        return result

    def __repr__(self) -> str:
        return f"IntegraClient({self._session.transport.port_name!r})"
