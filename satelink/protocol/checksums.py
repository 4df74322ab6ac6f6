"""
16-bit rolling checksum calculation and validation.

The INTEGRA protocol protects every frame body with a 16-bit checksum:
- Start from the seed 0x147A
- For each byte: rotate left by one bit, invert, then add the high byte
  of the state and the data byte (all modulo 2**16)
- Transmit the result high byte first

The checksum covers the opcode and arguments only. It never includes the
header, the footer or the checksum itself, and is always computed over
the unstuffed bytes.
"""

from __future__ import annotations

from satelink.protocol.constants import ProtocolConstants


def calculate_checksum(data: bytes | bytearray | memoryview) -> int:
    """
    Calculate the 16-bit checksum over the specified data.

    Args:
        data: Unstuffed opcode and argument bytes.

    Returns:
        16-bit checksum value (0-65535).

    Example:
        >>> hex(calculate_checksum(b"\\x7e"))
        '0xd860'
    """
    crc = ProtocolConstants.CHECKSUM_SEED
    for byte in data:
        crc = ((crc << 1) & 0xFFFF) | ((crc & 0x8000) >> 15)
        crc ^= 0xFFFF
        crc = (crc + (crc >> 8) + byte) & 0xFFFF
    return crc


def encode_checksum(checksum: int) -> bytes:
    """
    Encode a checksum value as 2 bytes, high byte first.

    Args:
        checksum: 16-bit checksum value.

    Returns:
        2-byte big-endian representation.

    Raises:
        ValueError: If checksum is not in range 0-65535.
    """
    if not 0 <= checksum <= 0xFFFF:
        raise ValueError(f"Checksum must be 0-65535, got {checksum}")
    return bytes([(checksum >> 8) & 0xFF, checksum & 0xFF])


def append_checksum(data: bytes | bytearray) -> bytes:
    """
    Calculate checksum and append it as 2 bytes.

    Args:
        data: Data to checksum.

    Returns:
        The data with the 2 checksum bytes appended.

    Example:
        >>> append_checksum(b"\\x7e")
        b'~\\xd8`'
    """
    return bytes(data) + encode_checksum(calculate_checksum(data))


def validate_checksum(data: bytes | bytearray | memoryview) -> bool:
    """
    Validate that the trailing 2 bytes are the checksum of the rest.

    Args:
        data: Unstuffed frame body including the checksum bytes.

    Returns:
        True if checksum is valid, False otherwise.
    """
    if len(data) < 3:
        return False

    received = (data[-2] << 8) | data[-1]
    return calculate_checksum(data[:-2]) == received
