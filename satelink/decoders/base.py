"""
Response decoder interface and shared bit helpers.

Each decoder turns the payload of one or more response opcodes into a
structured result. Decoders are stateless; anything they need beyond the
response itself (configuration, the event catalog, nested requests) comes
from the client passed to ``decode``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from satelink.exceptions import ParseError
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient


def bits(value: int, high: int, low: int) -> int:
    """
    Extract bits ``high..low`` (inclusive) of a byte as an integer.

    Example:
        >>> bits(0b1011_0000, 7, 6)
        2
    """
    width = high - low + 1
    return (value >> low) & ((1 << width) - 1)


def bit(value: int, position: int) -> bool:
    """Test a single bit."""
    return bool((value >> position) & 1)


def bcd(value: int) -> int:
    """Decode one packed BCD byte (``0x59`` -> 59)."""
    return (value >> 4) * 10 + (value & 0x0F)


def require_length(response: Response, minimum: int) -> bytes:
    """
    Get the response payload, checking it has at least ``minimum`` bytes.

    Raises:
        ParseError: If the payload is shorter.
    """
    payload = response.payload
    if len(payload) < minimum:
        raise ParseError(
            f"Payload too short for opcode 0x{response.opcode:02X}: "
            f"expected at least {minimum} bytes, got {len(payload)}",
            opcode=response.opcode,
            raw_data=payload.hex().upper(),
        )
    return payload


def format_version(digits: bytes) -> str:
    """
    Render 11 ASCII version digits as ``M.mm YYYY-MM-DD``.

    Example:
        >>> format_version(b"12320120527")
        '1.23 2012-05-27'
    """
    text = digits.decode("latin-1")
    return f"{text[0]}.{text[1:3]} {text[3:7]}-{text[7:9]}-{text[9:11]}"


class ResponseDecoder(ABC):
    """
    Abstract base class for response decoders.

    Implementations should:
    1. Declare the opcodes they handle
    2. Implement decode() to build a result model from the payload
    3. Raise ParseError for payloads they cannot interpret
    """

    @property
    @abstractmethod
    def opcodes(self) -> frozenset[int]:
        """
        The response opcodes this decoder handles.

        Returns:
            Set of opcode bytes.
        """
        ...

    @abstractmethod
    async def decode(self, response: Response, client: IntegraClient) -> Any:
        """
        Decode a validated response.

        Args:
            response: Response whose opcode is one of ``opcodes``.
            client: Client that received it, for configuration and
                nested requests.

        Returns:
            Decoder-specific result model.
        """
        ...

    def __repr__(self) -> str:
        handled = ", ".join(f"0x{op:02X}" for op in sorted(self.opcodes))
        return f"{type(self).__name__}({handled})"
