"""
INTEGRA / ETHM-1 protocol opcodes and constants.

Based on the Satel "INT-RS / ETHM-1 integration protocol" description.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Opcode(IntEnum):
    """
    Command/response opcodes.

    The opcode is the first byte of the (unstuffed) frame body. A reply
    carries the same opcode as its request, except for commands answered
    with a command result (0xEF).
    """

    # ===== Zone bitmaps (16 or 32 bytes) =====

    ZONES_VIOLATION = 0x00
    """Zones violation."""

    ZONES_TAMPER = 0x01
    """Zones tamper."""

    ZONES_ALARM = 0x02
    """Zones alarm."""

    ZONES_TAMPER_ALARM = 0x03
    """Zones tamper alarm."""

    ZONES_ALARM_MEMORY = 0x04
    """Zones alarm memory."""

    ZONES_TAMPER_ALARM_MEMORY = 0x05
    """Zones tamper alarm memory."""

    ZONES_BYPASS = 0x06
    """Zones bypass."""

    ZONES_NO_VIOLATION_TROUBLE = 0x07
    """Zones 'no violation' trouble."""

    ZONES_LONG_VIOLATION_TROUBLE = 0x08
    """Zones 'long violation' trouble."""

    # ===== Doors =====

    DOORS_OPENED = 0x18
    """Doors opened."""

    DOORS_OPENED_LONG = 0x19
    """Doors opened long."""

    # ===== System =====

    CLOCK_AND_STATUS = 0x1A
    """Clock and basic system status."""

    MODULE_VERSION = 0x7C
    """INT-RS / ETHM-1 module version."""

    PANEL_VERSION = 0x7E
    """INTEGRA type and firmware version."""

    READ_EVENT = 0x8C
    """Read one event-log record."""

    READ_NAME = 0xEE
    """Read device/object name."""

    COMMAND_RESULT = 0xEF
    """Result of a control command."""


class ObjectType(IntEnum):
    """Object-type selectors for READ_NAME (0xEE) queries."""

    PARTITION = 0x00
    """Partition (1..32)."""

    ZONE = 0x01
    """Zone (1..128, up to 256 on INTEGRA 256 PLUS)."""

    USER = 0x02
    """User (1..255)."""

    EXPANDER = 0x03
    """Expander/LCD (129..192 expander, 193..210 LCD)."""

    OUTPUT = 0x04
    """Output (1..128, up to 256 on INTEGRA 256 PLUS)."""

    ZONE_WITH_PARTITION = 0x05
    """Zone with partition assignment."""


class ProtocolConstants:
    """
    Protocol constants.

    Contains frame delimiters, timing values, buffer sizes, and special markers
    used throughout the protocol implementation.
    """

    # ===== Frame Delimiters =====

    SYNC: Final[int] = 0xFE
    """Frame marker byte; also the byte that gets stuffed inside a payload."""

    STUFFED: Final[int] = 0xF0
    """Byte following SYNC when SYNC occurs inside a payload."""

    HEADER: Final[bytes] = b"\xfe\xfe"
    """Start of frame."""

    FOOTER: Final[bytes] = b"\xfe\x0d"
    """End of frame."""

    CHECKSUM_SEED: Final[int] = 0x147A
    """Initial state of the 16-bit checksum."""

    BUSY_SENTINEL: Final[bytes] = b"\x10Busy!\r\n"
    """Reply sent by the module when it cannot take a request yet."""

    # ===== Timing Constants (seconds) =====

    MIN_SEND_INTERVAL: Final[float] = 1.0
    """Minimum spacing between two transmissions."""

    CONNECT_TIMEOUT: Final[float] = 2.0
    """TCP connect timeout."""

    READ_TIMEOUT: Final[float] = 30.0
    """Reply timeout."""

    BUSY_RETRY_DELAY: Final[float] = 5.0
    """First delay before resubmitting a command answered with Busy."""

    BUSY_BACKOFF_FACTOR: Final[float] = 2.0
    """Multiplier applied to the busy delay after each retry."""

    BUSY_MAX_DELAY: Final[float] = 60.0
    """Upper bound for a single busy delay."""

    BUSY_MAX_RETRIES: Final[int] = 5
    """Maximum number of resubmissions after Busy."""

    # ===== Buffer Sizes =====

    LEGACY_READ_SIZE: Final[int] = 100
    """Reply size cap used by legacy clients (too small for some opcodes)."""

    MAX_RESPONSE_SIZE: Final[int] = 1024
    """Default cap on the size of a single reply."""

    READ_CHUNK_SIZE: Final[int] = 256
    """Bytes requested from the transport per read call."""

    # ===== Connection Defaults =====

    DEFAULT_PORT: Final[int] = 7094
    """ETHM-1 integration port."""

    DEFAULT_BAUD_RATE: Final[int] = 19200
    """INT-RS serial baud rate."""

    # ===== Special Values =====

    LATEST_EVENT_INDEX: Final[str] = "FFFFFF"
    """Event index that selects the most recent event."""

    NAME_LENGTH: Final[int] = 16
    """Length of an object name in a READ_NAME reply."""


ZONE_BITMAP_OPCODES: Final[frozenset[int]] = frozenset({
    Opcode.ZONES_VIOLATION,
    Opcode.ZONES_TAMPER,
    Opcode.ZONES_ALARM,
    Opcode.ZONES_TAMPER_ALARM,
    Opcode.ZONES_ALARM_MEMORY,
    Opcode.ZONES_TAMPER_ALARM_MEMORY,
    Opcode.ZONES_BYPASS,
    Opcode.ZONES_NO_VIOLATION_TROUBLE,
    Opcode.ZONES_LONG_VIOLATION_TROUBLE,
})
"""Opcodes answered with a zone bitmap."""

DOOR_OPCODES: Final[frozenset[int]] = frozenset({
    Opcode.DOORS_OPENED,
    Opcode.DOORS_OPENED_LONG,
})
"""Opcodes answered with an (undecoded) doors bitmap."""

ZONE_BITMAP_SIZES: Final[frozenset[int]] = frozenset({16, 32})
"""Valid zone bitmap lengths (128 or 256 zones)."""
