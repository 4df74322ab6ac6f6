"""
Protocol layer for INTEGRA communication.

This module contains the low-level protocol handling:
- Opcodes and protocol constants
- Checksum calculation and validation
- Byte stuffing
- Frame encoding and parsing
- Command and Response messages
"""

from satelink.protocol.checksums import (
    append_checksum,
    calculate_checksum,
    encode_checksum,
    validate_checksum,
)
from satelink.protocol.constants import ObjectType, Opcode, ProtocolConstants
from satelink.protocol.frame_codec import (
    DEFAULT_FRAME_CODEC,
    FrameCodec,
    FrameParseError,
    FrameParseResult,
    stuff,
    unstuff,
)
from satelink.protocol.messages import Command, Response

__all__ = [
    # Constants
    "Opcode",
    "ObjectType",
    "ProtocolConstants",
    # Checksums
    "calculate_checksum",
    "encode_checksum",
    "append_checksum",
    "validate_checksum",
    # Framing
    "stuff",
    "unstuff",
    "FrameCodec",
    "FrameParseResult",
    "FrameParseError",
    "DEFAULT_FRAME_CODEC",
    # Messages
    "Command",
    "Response",
]
