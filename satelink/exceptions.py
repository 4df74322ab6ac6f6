"""
Errors raised by satelink.

Everything derives from SatelinkError. Below it the tree separates what
went wrong on the wire (ProtocolError and its children: framing,
checksum, dispatch), what could not be decoded (ParseError), and what
went wrong reaching the module (ConnectionError, TransportError,
TimeoutError, BusyError). Any of them aborts the command in flight.
"""

from __future__ import annotations


class SatelinkError(Exception):
    """Root of every satelink error."""

    pass


class ProtocolError(SatelinkError):
    """The module sent something the protocol does not allow, or not what was asked for."""

    pass


class FramingError(ProtocolError):
    """
    A reply is not a well-formed frame.

    Missing ``FE FE`` header or ``FE 0D`` footer, no body between them,
    or an ``FE`` followed by anything but ``F0``.
    """

    pass


class ChecksumMismatchError(ProtocolError):
    """The trailing checksum of a reply disagrees with its payload."""

    def __init__(
        self,
        message: str = "Checksum validation failed",
        *,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received

    def __str__(self) -> str:
        text = super().__str__()
        if self.expected is None or self.received is None:
            return text
        return f"{text} (computed 0x{self.expected:04X}, frame says 0x{self.received:04X})"


class EmptyResponseError(ProtocolError):
    """The module hung up without sending a byte."""

    pass


class UnknownOpcodeError(ProtocolError):
    """
    A reply opcode has no decoder.

    Only the current command fails; the session can be used again.
    """

    def __init__(self, opcode: int, message: str | None = None) -> None:
        self.opcode = opcode
        super().__init__(message or f"No decoder registered for opcode 0x{opcode:02X}")


class UnsupportedResultCodeError(ProtocolError):
    """A 0xEF result byte outside the documented codes."""

    def __init__(self, result_code: int) -> None:
        self.result_code = result_code
        super().__init__(f"Unsupported command result code 0x{result_code:02X}")


class ParseError(SatelinkError):
    """
    A payload could not be turned into a record.

    Short payloads, bitmaps of the wrong size, bad BCD digits and
    impossible dates all end up here. ``raw_data`` holds the payload as
    upper-case hex when the decoder had it at hand.
    """

    def __init__(
        self,
        message: str,
        *,
        opcode: int | None = None,
        raw_data: str | None = None,
    ) -> None:
        super().__init__(message)
        self.opcode = opcode
        self.raw_data = raw_data

    def __str__(self) -> str:
        text = super().__str__()
        if self.opcode is not None:
            text += f" opcode=0x{self.opcode:02X}"
        if self.raw_data:
            shown = self.raw_data if len(self.raw_data) <= 40 else self.raw_data[:40] + "..."
            text += f" data={shown}"
        return text


class TimeoutError(SatelinkError):  # noqa: A001
    """No reply arrived within the read timeout."""

    def __init__(
        self,
        message: str = "Communication timeout",
        *,
        timeout_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds

    def __str__(self) -> str:
        text = super().__str__()
        if self.timeout_seconds is None:
            return text
        return f"{text} (after {self.timeout_seconds:.1f}s)"


class ConnectionError(SatelinkError):  # noqa: A001
    """The ETHM-1 socket or INT-RS port could not be opened in time."""

    pass


class TransportError(SatelinkError):
    """I/O failed on an established link, or the link was used while closed."""

    pass


class BusyError(SatelinkError):
    """The module kept answering "Busy!" until the retries ran out."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Module still busy after {attempts} attempts")
