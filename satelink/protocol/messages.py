"""
Protocol messages: outgoing commands and validated responses.

Both are immutable value objects. A Command is not yet framed; a Response
only exists once its frame passed header, footer and checksum validation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from satelink.protocol.constants import Opcode


def _opcode_name(opcode: int) -> str:
    try:
        return Opcode(opcode).name
    except ValueError:
        return f"0x{opcode:02X}"


@dataclass(frozen=True)
class Command:
    """
    An outgoing command: opcode byte plus ordered argument bytes.

    Example:
        >>> Command(Opcode.READ_EVENT, b"\\xff\\xff\\xff").to_bytes().hex()
        '8cffffff'
        >>> Command.from_hex("8CFFFFFF") == Command(0x8C, b"\\xff\\xff\\xff")
        True
    """

    opcode: int
    arguments: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.opcode <= 0xFF:
            raise ValueError(f"Opcode must be 0-255, got {self.opcode}")
        object.__setattr__(self, "opcode", int(self.opcode))
        object.__setattr__(self, "arguments", bytes(self.arguments))

    @classmethod
    def build(cls, opcode: int, *arguments: int | bytes | Iterable[int]) -> Command:
        """
        Build a command from a mix of ints and byte strings.

        Args:
            opcode: Command opcode.
            *arguments: Single byte values or byte sequences, in order.

        Returns:
            Command instance.
        """
        data = bytearray()
        for argument in arguments:
            if isinstance(argument, int):
                data.append(argument)
            else:
                data.extend(argument)
        return cls(opcode, bytes(data))

    @classmethod
    def from_hex(cls, text: str) -> Command:
        """
        Parse a command written as a hex string, e.g. ``"EE0501"``.

        Raises:
            ValueError: If text is empty or not valid hex.
        """
        data = bytes.fromhex(text)
        if not data:
            raise ValueError("Command must contain at least an opcode")
        return cls(data[0], data[1:])

    def to_bytes(self) -> bytes:
        """Get the unframed command bytes (opcode followed by arguments)."""
        return bytes([self.opcode]) + self.arguments

    def __repr__(self) -> str:
        if self.arguments:
            return f"Command({_opcode_name(self.opcode)}, {self.arguments.hex().upper()})"
        return f"Command({_opcode_name(self.opcode)})"


@dataclass(frozen=True)
class Response:
    """
    A validated response frame.

    Attributes:
        opcode: Leading byte of the frame body.
        payload: Body bytes after the opcode, without the checksum.
        raw_frame: Complete frame bytes as received.
    """

    opcode: int
    payload: bytes
    raw_frame: bytes = field(default=b"", repr=False, compare=False)

    @property
    def payload_hex(self) -> str:
        """Payload as an upper-case hex string."""
        return self.payload.hex().upper()

    @property
    def known_opcode(self) -> Opcode | None:
        """Get the opcode as an Opcode enum if recognized."""
        try:
            return Opcode(self.opcode)
        except ValueError:
            return None

    def __repr__(self) -> str:
        if self.payload:
            return f"Response({_opcode_name(self.opcode)}, payload={len(self.payload)} bytes)"
        return f"Response({_opcode_name(self.opcode)})"
