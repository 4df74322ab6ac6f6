"""
Response decoders and opcode dispatch.
"""

from satelink.decoders.base import ResponseDecoder
from satelink.decoders.events import EventRecordDecoder, parse_event
from satelink.decoders.names import ObjectNameDecoder
from satelink.decoders.registry import (
    DecoderRegistry,
    ResponseDispatcher,
    create_default_dispatcher,
    create_default_registry,
)
from satelink.decoders.results import CommandResultDecoder, classify_result
from satelink.decoders.status import DoorsDecoder, SystemStatusDecoder
from satelink.decoders.versions import ModuleVersionDecoder, PanelVersionDecoder
from satelink.decoders.zones import ZoneBitmapDecoder, flagged_zones

__all__ = [
    # Dispatch
    "ResponseDecoder",
    "DecoderRegistry",
    "ResponseDispatcher",
    "create_default_registry",
    "create_default_dispatcher",
    # Decoders
    "ObjectNameDecoder",
    "ZoneBitmapDecoder",
    "DoorsDecoder",
    "SystemStatusDecoder",
    "ModuleVersionDecoder",
    "PanelVersionDecoder",
    "CommandResultDecoder",
    "EventRecordDecoder",
    # Helpers
    "flagged_zones",
    "classify_result",
    "parse_event",
]
