"""
System status decoders: clock and status (0x1A), doors (0x18, 0x19).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from satelink.decoders.base import ResponseDecoder, bcd, bit, bits, require_length
from satelink.exceptions import ParseError
from satelink.models.records import DoorsReport, SystemStatus
from satelink.protocol.constants import DOOR_OPCODES, Opcode
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Low nibble of the second status byte; use 0x7E for the detailed type.
DEVICE_TYPES: dict[int, str] = {
    0: "INTEGRA 24",
    1: "INTEGRA 32",
    2: "INTEGRA 64 or 64 PLUS",
    3: "INTEGRA 128 or 128 PLUS",
    4: "INTEGRA 128-WRL",
    8: "INTEGRA 256 PLUS",
}


def device_type_name(type_id: int, table: dict[int, str]) -> str:
    """Look up a device type name, falling back to ``unknown (id N)``."""
    return table.get(type_id, f"unknown (id {type_id})")


class SystemStatusDecoder(ResponseDecoder):
    """
    Decodes the panel clock and basic system status.

    Payload layout::

        bytes 0-6   YYYY MM DD hh mm ss, packed BCD
        byte 7      .7 service mode, .6 troubles, .210 weekday (0 = Monday)
        byte 8      .7 ACU-100, .6 INT-RX, .5 troubles memory,
                    .4 grade 2/3 set, .3210 INTEGRA type
    """

    @property
    def opcodes(self) -> frozenset[int]:
        return frozenset({Opcode.CLOCK_AND_STATUS})

    async def decode(self, response: Response, client: IntegraClient) -> SystemStatus:
        payload = require_length(response, 9)
        data1, data2 = payload[7], payload[8]

        year = bcd(payload[0]) * 100 + bcd(payload[1])
        try:
            clock = datetime(
                year,
                bcd(payload[2]),
                bcd(payload[3]),
                bcd(payload[4]),
                bcd(payload[5]),
                bcd(payload[6]),
            )
        except ValueError as e:
            raise ParseError(
                f"Invalid panel clock: {e}",
                opcode=response.opcode,
                raw_data=response.payload_hex,
            ) from e

        weekday_index = bits(data1, 2, 0)
        if weekday_index >= len(WEEKDAYS):
            raise ParseError(
                f"Invalid weekday {weekday_index}",
                opcode=response.opcode,
                raw_data=response.payload_hex,
            )

        type_id = bits(data2, 3, 0)
        status = SystemStatus(
            device_type=device_type_name(type_id, DEVICE_TYPES),
            device_type_id=type_id,
            clock=clock,
            weekday=WEEKDAYS[weekday_index],
            service_mode=bit(data1, 7),
            troubles=bit(data1, 6),
            acu100_present=bit(data2, 7),
            intrx_present=bit(data2, 6),
            troubles_memory=bit(data2, 5),
            grade3_set=bit(data2, 4),
        )
        logger.info("Integra type: %s, time: %s", status.device_type, status.datetime_text)
        return status


class DoorsDecoder(ResponseDecoder):
    """Reports opened doors as raw hex."""

    @property
    def opcodes(self) -> frozenset[int]:
        return DOOR_OPCODES

    async def decode(self, response: Response, client: IntegraClient) -> DoorsReport:
        return DoorsReport(opcode=response.opcode, raw_data=response.payload_hex)
