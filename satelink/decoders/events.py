"""
Event log record decoder (0x8C).

Record layout, bit 7 first::

    byte 1   Y Y Z E S2 S2 S1 S1   year mod 4, not-empty, event present,
                                   monitoring statuses
    byte 2   K K K D D D D D       event class, day
    byte 3   M M M M T T T T       month, minute-of-day bits 11-8
    byte 4   t t t t t t t t       minute-of-day bits 7-0
    byte 5   P P P P P R C C       partition, restore, code bits 9-8
    byte 6   c c c c c c c c       code bits 7-0
    byte 7   n n n n n n n n       source number
    byte 8   S S S u u u u u       object number, user-control number
    bytes 9-11                     event index (optional)

The lowest minute-of-day bit is taken from byte 3 bit 0 rather than byte 4
bit 0, matching the values panels have always been read with.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satelink.decoders.base import ResponseDecoder, bit, bits, require_length
from satelink.exceptions import ParseError
from satelink.models.records import EventClass, EventRecord, MonitoringStatus
from satelink.protocol.constants import Opcode
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.catalog import EventCatalog
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)

RECORD_SIZE = 8
INDEX_SIZE = 3


def minute_of_day(byte3: int, byte4: int) -> int:
    """Assemble the 12-bit minute-of-day from bytes 3 and 4."""
    return (bits(byte3, 3, 0) << 8) | (bits(byte4, 7, 1) << 1) | bits(byte3, 0, 0)


def parse_event(payload: bytes, catalog: EventCatalog | None = None) -> EventRecord:
    """
    Decode an event record payload.

    Args:
        payload: 8 record bytes, optionally followed by the 3-byte event index.
        catalog: Catalog used to resolve the event text, if any.

    Returns:
        EventRecord; category and text are None when the catalog has no
        matching entry, index is None when the payload stops after the record.

    Raises:
        ParseError: If the payload is shorter than one record.
    """
    if len(payload) < RECORD_SIZE:
        raise ParseError(
            f"Event record needs {RECORD_SIZE} bytes, got {len(payload)}",
            opcode=Opcode.READ_EVENT,
            raw_data=payload.hex().upper(),
        )
    raw_index = payload[RECORD_SIZE:RECORD_SIZE + INDEX_SIZE]

    b1, b2, b3, b4, b5, b6, b7, b8 = payload[:RECORD_SIZE]

    minutes = minute_of_day(b3, b4)
    restore = bit(b5, 2)
    code = (bits(b5, 1, 0) << 8) | b6

    entry = catalog.lookup(code, restore) if catalog is not None else None
    if entry is None:
        logger.debug("No catalog entry for event code %d restore=%s", code, restore)

    return EventRecord(
        year_mod4=bits(b1, 7, 6),
        not_empty=bit(b1, 5),
        event_present=bit(b1, 4),
        s2_status=MonitoringStatus(bits(b1, 3, 2)),
        s1_status=MonitoringStatus(bits(b1, 1, 0)),
        event_class=EventClass(bits(b2, 7, 5)),
        day=bits(b2, 4, 0),
        month=bits(b3, 7, 4),
        hour=minutes // 60,
        minute=minutes % 60,
        partition=bits(b5, 7, 3),
        restore=restore,
        code=code,
        category=entry.category if entry else None,
        text=entry.text if entry else None,
        source=b7,
        object_number=bits(b8, 7, 5),
        user_control=bits(b8, 4, 0),
        index=raw_index.hex().upper() if len(raw_index) == INDEX_SIZE else None,
    )


class EventRecordDecoder(ResponseDecoder):
    """Decodes one event log record, resolving its text via the client's catalog."""

    @property
    def opcodes(self) -> frozenset[int]:
        return frozenset({Opcode.READ_EVENT})

    async def decode(self, response: Response, client: IntegraClient) -> EventRecord:
        payload = require_length(response, RECORD_SIZE)
        record = parse_event(payload, client.catalog)
        logger.info(
            "Event %s: %s %s class=%s code=%d %s",
            record.index,
            record.date_text,
            record.time_text,
            record.event_class.name,
            record.code,
            record.text or "",
        )
        return record
