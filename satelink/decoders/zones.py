"""
Zone bitmap decoder (0x00-0x08).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satelink.decoders.base import ResponseDecoder
from satelink.exceptions import ParseError, ProtocolError
from satelink.models.records import ZoneSet
from satelink.protocol.constants import ZONE_BITMAP_OPCODES, ZONE_BITMAP_SIZES, ObjectType
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)


def flagged_zones(bitmap: bytes) -> list[int]:
    """
    List the 1-based zone numbers whose bits are set.

    Bit ``b`` of byte ``i`` (least significant first) is zone ``8*i + b + 1``.

    Example:
        >>> flagged_zones(bytes([0x05, 0x20]))
        [1, 3, 14]
    """
    return [
        8 * index + position + 1
        for index, value in enumerate(bitmap)
        for position in range(8)
        if value & (1 << position)
    ]


class ZoneBitmapDecoder(ResponseDecoder):
    """
    Decodes zone state bitmaps and resolves the name of each flagged zone.

    Each flagged zone costs one nested name request over the same client,
    so a report with many active zones takes correspondingly long. A zone
    whose name cannot be read is kept with an empty name; transport
    errors still abort the report.
    """

    @property
    def opcodes(self) -> frozenset[int]:
        return ZONE_BITMAP_OPCODES

    async def decode(self, response: Response, client: IntegraClient) -> ZoneSet:
        payload = response.payload
        if len(payload) not in ZONE_BITMAP_SIZES:
            raise ParseError(
                f"Zone bitmap must be 16 or 32 bytes, got {len(payload)}",
                opcode=response.opcode,
                raw_data=response.payload_hex,
            )

        numbers = flagged_zones(payload)
        logger.info("Zone report 0x%02X: %d zone(s) flagged", response.opcode, len(numbers))

        zones: dict[int, str] = {}
        for number in numbers:
            try:
                name = await client.read_object_name(ObjectType.ZONE_WITH_PARTITION, number & 0xFF)
            except (ProtocolError, ParseError) as e:
                logger.warning("Name of zone %d unavailable: %s", number, e)
                zones[number] = ""
            else:
                zones[number] = name.name

        return ZoneSet(opcode=response.opcode, zones=zones, bitmap_size=len(payload))
