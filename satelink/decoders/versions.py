"""
Version decoders: communication module (0x7C) and panel (0x7E).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satelink.decoders.base import ResponseDecoder, bit, format_version, require_length
from satelink.decoders.status import device_type_name
from satelink.models.records import ModuleVersion, VersionInfo
from satelink.protocol.constants import Opcode
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)

VERSION_DIGITS = 11

# id -> (name, zones, outputs)
PANEL_TYPES: dict[int, tuple[str, int, int]] = {
    0: ("INTEGRA 24", 24, 20),
    1: ("INTEGRA 32", 32, 32),
    2: ("INTEGRA 64", 64, 64),
    3: ("INTEGRA 128", 128, 128),
    4: ("INTEGRA 128-WRL SIM300", 128, 128),
    132: ("INTEGRA 128-WRL LEON", 128, 128),
    66: ("INTEGRA 64 PLUS", 64, 64),
    67: ("INTEGRA 128 PLUS", 128, 128),
    72: ("INTEGRA 256 PLUS", 256, 256),
}

LANGUAGES: dict[int, str] = {
    1: "English",
    7: "Czech",
}

FLASHED = 0xFF


class ModuleVersionDecoder(ResponseDecoder):
    """
    Decodes the INT-RS / ETHM-1 module version.

    Modules older than 2013-11-08 do not know this command and never reply.
    """

    @property
    def opcodes(self) -> frozenset[int]:
        return frozenset({Opcode.MODULE_VERSION})

    async def decode(self, response: Response, client: IntegraClient) -> ModuleVersion:
        payload = require_length(response, VERSION_DIGITS + 1)
        result = ModuleVersion(
            version=format_version(payload[:VERSION_DIGITS]),
            can_serve_32_bytes=bit(payload[VERSION_DIGITS], 0),
        )
        logger.info("Module version: %s (32-byte bitmaps: %s)", result.version, result.can_serve_32_bytes)
        return result


class PanelVersionDecoder(ResponseDecoder):
    """
    Decodes the INTEGRA panel type, firmware version, language and flash state.
    """

    @property
    def opcodes(self) -> frozenset[int]:
        return frozenset({Opcode.PANEL_VERSION})

    async def decode(self, response: Response, client: IntegraClient) -> VersionInfo:
        payload = require_length(response, VERSION_DIGITS + 3)
        type_id = payload[0]

        if type_id in PANEL_TYPES:
            name, zones, outputs = PANEL_TYPES[type_id]
        else:
            name, zones, outputs = device_type_name(type_id, {}), "?", "?"

        language = payload[VERSION_DIGITS + 1]
        result = VersionInfo(
            device_type=name,
            device_type_id=type_id,
            zones=zones,
            outputs=outputs,
            version=format_version(payload[1:VERSION_DIGITS + 1]),
            language=language,
            language_name=LANGUAGES.get(language),
            flashed=payload[VERSION_DIGITS + 2] == FLASHED,
        )
        logger.info("Integra type: %s (%s zones), version %s", result.device_type, result.zones, result.version)
        return result
