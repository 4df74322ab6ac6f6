"""
Object name decoder (0xEE).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satelink.decoders.base import ResponseDecoder, require_length
from satelink.models.records import ObjectName
from satelink.protocol.constants import Opcode, ProtocolConstants
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)

# type, number, function
_HEADER_SIZE = 3


class ObjectNameDecoder(ResponseDecoder):
    """
    Decodes the name of a partition, zone, user, expander or output.

    Payload layout::

        byte 0      object type selector
        byte 1      object number
        byte 2      object function
        bytes 3-18  name, one character per byte
        byte 19     partition (zone-with-partition queries only)
    """

    @property
    def opcodes(self) -> frozenset[int]:
        return frozenset({Opcode.READ_NAME})

    async def decode(self, response: Response, client: IntegraClient) -> ObjectName:
        payload = require_length(response, _HEADER_SIZE)
        name_end = _HEADER_SIZE + ProtocolConstants.NAME_LENGTH

        name = payload[_HEADER_SIZE:name_end].decode("latin-1")
        if client.config.strip_names:
            name = name.rstrip()

        partition = payload[name_end] if len(payload) > name_end else None

        result = ObjectName(
            object_type=payload[0],
            number=payload[1],
            function=payload[2],
            name=name,
            partition=partition,
        )
        logger.debug("Object %d/%d name: %r", result.object_type, result.number, result.name)
        return result
