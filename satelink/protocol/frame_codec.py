"""
INTEGRA frame encoding and parsing.

Wire format::

    FE FE  <body, FE-stuffed>  FE 0D
           \\_ opcode, arguments/payload, checksum high, checksum low

Inside the body every 0xFE byte is transmitted as the pair FE F0. The
checksum is computed over the unstuffed opcode and data bytes and
appended before stuffing.

Inbound unstuffing:
    Legacy clients never unstuffed inbound frames before comparing
    checksums, so any reply whose body contained 0xFE failed validation
    or was decoded with a stray F0 byte. ``FrameCodec`` unstuffs
    by default, which makes ``decode(encode(x))`` the identity; pass
    ``unstuff_inbound=False`` to reproduce the legacy behaviour.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from satelink.exceptions import ChecksumMismatchError, FramingError
from satelink.protocol.checksums import append_checksum, calculate_checksum
from satelink.protocol.constants import ProtocolConstants
from satelink.protocol.messages import Command, Response

logger = logging.getLogger(__name__)

_SYNC = ProtocolConstants.SYNC
_STUFFED_PAIR = bytes([ProtocolConstants.SYNC, ProtocolConstants.STUFFED])


def stuff(data: bytes | bytearray) -> bytes:
    """
    Escape every 0xFE byte as FE F0.

    Example:
        >>> stuff(b"\\x01\\xfe\\x02").hex()
        '01fef002'
    """
    return bytes(data).replace(bytes([_SYNC]), _STUFFED_PAIR)


def unstuff(data: bytes | bytearray) -> bytes:
    """
    Reverse ``stuff``.

    Raises:
        FramingError: If 0xFE is followed by anything other than 0xF0, or
            ends the data.
    """
    result = bytearray()
    i = 0
    length = len(data)
    while i < length:
        byte = data[i]
        if byte == _SYNC:
            if i + 1 >= length or data[i + 1] != ProtocolConstants.STUFFED:
                raise FramingError(f"Invalid stuffing sequence at position {i}")
            i += 2
        else:
            i += 1
        result.append(byte)
    return bytes(result)


class FrameParseResult(Enum):
    """
    Result codes for frame parsing operations.
    """

    SUCCESS = auto()
    """Frame was successfully parsed and validated."""

    EMPTY_BUFFER = auto()
    """Buffer is empty, no data to parse."""

    INVALID_FORMAT = auto()
    """Header, footer or stuffing is invalid."""

    INVALID_CHECKSUM = auto()
    """Frame checksum validation failed (data corruption)."""


@dataclass(frozen=True)
class FrameParseError:
    """
    Details about a frame parsing failure.
    """

    result: FrameParseResult
    message: str
    expected_checksum: int | None = None
    received_checksum: int | None = None


class FrameCodec:
    """
    Encoder/decoder for INTEGRA frames.

    The codec is stateless apart from its configuration and can be shared.

    Example:
        >>> codec = FrameCodec()
        >>> codec.encode(Command(0x7E)).hex()
        'fefe7ed860fe0d'
        >>> codec.decode(bytes.fromhex("fefe7ed860fe0d"))
        Response(PANEL_VERSION)
    """

    # opcode + 2 checksum bytes
    MIN_BODY_SIZE = 3

    def __init__(self, unstuff_inbound: bool = True) -> None:
        """
        Initialize the codec.

        Args:
            unstuff_inbound: Unstuff FE F0 pairs in received frames before
                validating the checksum.
        """
        self._unstuff_inbound = unstuff_inbound

    @property
    def unstuff_inbound(self) -> bool:
        return self._unstuff_inbound

    def encode(self, command: Command) -> bytes:
        """
        Build the wire frame for a command.

        Args:
            command: Command to send.

        Returns:
            Complete frame bytes.
        """
        body = append_checksum(command.to_bytes())
        return ProtocolConstants.HEADER + stuff(body) + ProtocolConstants.FOOTER

    def parse(
        self,
        buffer: bytes | bytearray | memoryview,
    ) -> tuple[FrameParseResult, Response | FrameParseError]:
        """
        Parse and validate a frame.

        Args:
            buffer: A single complete frame.

        Returns:
            Tuple of (result, frame_or_error):
            - On success: (SUCCESS, Response)
            - On failure: (error_code, FrameParseError)
        """
        if not buffer:
            return FrameParseResult.EMPTY_BUFFER, FrameParseError(
                result=FrameParseResult.EMPTY_BUFFER,
                message="Buffer is empty",
            )

        frame = bytes(buffer)
        if not frame.startswith(ProtocolConstants.HEADER):
            return FrameParseResult.INVALID_FORMAT, FrameParseError(
                result=FrameParseResult.INVALID_FORMAT,
                message=f"Missing FE FE header: {frame[:2].hex().upper()}",
            )
        if len(frame) < 4 or not frame.endswith(ProtocolConstants.FOOTER):
            return FrameParseResult.INVALID_FORMAT, FrameParseError(
                result=FrameParseResult.INVALID_FORMAT,
                message=f"Missing FE 0D footer: {frame[-2:].hex().upper()}",
            )

        body = frame[2:-2]
        if self._unstuff_inbound:
            try:
                body = unstuff(body)
            except FramingError as e:
                return FrameParseResult.INVALID_FORMAT, FrameParseError(
                    result=FrameParseResult.INVALID_FORMAT,
                    message=str(e),
                )

        if len(body) < self.MIN_BODY_SIZE:
            return FrameParseResult.INVALID_FORMAT, FrameParseError(
                result=FrameParseResult.INVALID_FORMAT,
                message=f"Frame body too short ({len(body)} bytes)",
            )

        data = body[:-2]
        expected = calculate_checksum(data)
        received = (body[-2] << 8) | body[-1]
        if expected != received:
            return FrameParseResult.INVALID_CHECKSUM, FrameParseError(
                result=FrameParseResult.INVALID_CHECKSUM,
                message=f"Checksum mismatch: expected 0x{expected:04X}, got 0x{received:04X}",
                expected_checksum=expected,
                received_checksum=received,
            )

        return FrameParseResult.SUCCESS, Response(
            opcode=data[0],
            payload=data[1:],
            raw_frame=frame,
        )

    def decode(self, buffer: bytes | bytearray | memoryview) -> Response:
        """
        Parse a frame, raising on failure.

        Args:
            buffer: A single complete frame.

        Returns:
            The validated Response.

        Raises:
            FramingError: Header, footer, stuffing or length is invalid.
            ChecksumMismatchError: The checksum does not match.
        """
        result, parsed = self.parse(buffer)
        if result == FrameParseResult.SUCCESS:
            return parsed

        logger.error("Invalid frame received: %s (%s)", bytes(buffer).hex().upper(), parsed.message)
        if result == FrameParseResult.INVALID_CHECKSUM:
            raise ChecksumMismatchError(
                expected=parsed.expected_checksum,
                received=parsed.received_checksum,
            )
        raise FramingError(parsed.message)

    def __repr__(self) -> str:
        return f"FrameCodec(unstuff_inbound={self._unstuff_inbound})"


DEFAULT_FRAME_CODEC: FrameCodec = FrameCodec()
"""Default FrameCodec instance for convenience."""
