"""
Decoder registry and response dispatch.

Decoders are registered per opcode in a DecoderRegistry during setup. A
ResponseDispatcher then takes a frozen snapshot of that table; after
construction the opcode -> decoder mapping never changes, so one
dispatcher can be shared by every client.

Architecture:
    ResponseDispatcher
        └── opcode table (read-only snapshot of a DecoderRegistry)
            ├── ObjectNameDecoder      0xEE
            ├── ZoneBitmapDecoder      0x00-0x08
            ├── DoorsDecoder           0x18, 0x19
            ├── SystemStatusDecoder    0x1A
            ├── ModuleVersionDecoder   0x7C
            ├── PanelVersionDecoder    0x7E
            ├── EventRecordDecoder     0x8C
            └── CommandResultDecoder   0xEF
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from satelink.decoders.base import ResponseDecoder
from satelink.exceptions import UnknownOpcodeError
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)


class DecoderRegistry:
    """
    Mutable opcode -> decoder table used while setting up a dispatcher.

    Example:
        >>> registry = DecoderRegistry()
        >>> registry.register(CommandResultDecoder())
        >>> registry.has(0xEF)
        True
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._decoders: dict[int, ResponseDecoder] = {}

    def register(self, decoder: ResponseDecoder) -> None:
        """
        Register a decoder for every opcode it handles.

        Note:
            Replaces any decoder already registered for those opcodes.
        """
        for opcode in decoder.opcodes:
            self._decoders[opcode] = decoder

    def get(self, opcode: int) -> ResponseDecoder | None:
        """Get the decoder for an opcode, or None."""
        return self._decoders.get(opcode)

    def has(self, opcode: int) -> bool:
        """Check if a decoder is registered for an opcode."""
        return opcode in self._decoders

    def unregister(self, opcode: int) -> bool:
        """
        Remove the decoder registered for an opcode.

        Returns:
            True if a decoder was removed, False if none was registered.
        """
        if opcode in self._decoders:
            del self._decoders[opcode]
            return True
        return False

    def clear(self) -> None:
        """Remove all registered decoders."""
        self._decoders.clear()

    @property
    def opcodes(self) -> frozenset[int]:
        """Get all opcodes with a registered decoder."""
        return frozenset(self._decoders)

    def snapshot(self) -> Mapping[int, ResponseDecoder]:
        """Get a read-only copy of the current table."""
        return MappingProxyType(dict(self._decoders))

    def __len__(self) -> int:
        return len(self._decoders)

    def __repr__(self) -> str:
        return f"DecoderRegistry(opcodes={len(self._decoders)})"


class ResponseDispatcher:
    """
    Routes validated responses to their decoder.

    Unknown opcodes raise UnknownOpcodeError; the caller decides whether
    that ends its work; the session remains usable either way.
    """

    def __init__(self, registry: DecoderRegistry) -> None:
        self._table = registry.snapshot()

    @property
    def table(self) -> Mapping[int, ResponseDecoder]:
        """Read-only opcode -> decoder table."""
        return self._table

    def supports(self, opcode: int) -> bool:
        return opcode in self._table

    async def dispatch(self, response: Response, client: IntegraClient) -> Any:
        """
        Decode a response with the decoder registered for its opcode.

        Raises:
            UnknownOpcodeError: If no decoder handles the opcode.
            ParseError: If the decoder rejects the payload.
        """
        decoder = self._table.get(response.opcode)
        if decoder is None:
            logger.error("No decoder for opcode 0x%02X", response.opcode)
            raise UnknownOpcodeError(response.opcode)

        logger.debug("Dispatching %r to %r", response, decoder)
        return await decoder.decode(response, client)

    def __repr__(self) -> str:
        return f"ResponseDispatcher(opcodes={len(self._table)})"


def create_default_registry() -> DecoderRegistry:
    """
    Create a new registry with all built-in decoders registered.

    Returns:
        DecoderRegistry covering every supported response opcode.
    """
    from satelink.decoders.events import EventRecordDecoder
    from satelink.decoders.names import ObjectNameDecoder
    from satelink.decoders.results import CommandResultDecoder
    from satelink.decoders.status import DoorsDecoder, SystemStatusDecoder
    from satelink.decoders.versions import ModuleVersionDecoder, PanelVersionDecoder
    from satelink.decoders.zones import ZoneBitmapDecoder

    registry = DecoderRegistry()
    for decoder in (
        ObjectNameDecoder(),
        ZoneBitmapDecoder(),
        DoorsDecoder(),
        SystemStatusDecoder(),
        ModuleVersionDecoder(),
        PanelVersionDecoder(),
        EventRecordDecoder(),
        CommandResultDecoder(),
    ):
        registry.register(decoder)
    return registry


def create_default_dispatcher() -> ResponseDispatcher:
    """Create a dispatcher over the built-in decoders."""
    return ResponseDispatcher(create_default_registry())
