"""
Command result decoder (0xEF).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satelink.decoders.base import ResponseDecoder, require_length
from satelink.exceptions import UnsupportedResultCodeError
from satelink.models.records import CommandResult, ResultCode
from satelink.protocol.constants import Opcode
from satelink.protocol.messages import Response

if TYPE_CHECKING:
    from satelink.client import IntegraClient

logger = logging.getLogger(__name__)


def classify_result(code: int) -> ResultCode:
    """
    Map a raw result byte to its outcome.

    ``0x80``-``0x8F`` are reported as other errors.

    Raises:
        UnsupportedResultCodeError: For bytes outside the documented set.
    """
    if 0x80 <= code <= 0x8F:
        return ResultCode.OTHER_ERROR
    try:
        return ResultCode(code)
    except ValueError:
        raise UnsupportedResultCodeError(code) from None


class CommandResultDecoder(ResponseDecoder):
    """Decodes the outcome of a control command."""

    @property
    def opcodes(self) -> frozenset[int]:
        return frozenset({Opcode.COMMAND_RESULT})

    async def decode(self, response: Response, client: IntegraClient) -> CommandResult:
        code = require_length(response, 1)[0]
        reason = classify_result(code)
        success = reason is ResultCode.OK

        if success or reason is ResultCode.ACCEPTED_PENDING:
            logger.info("Command result 0x%02X: %s", code, reason.description)
        else:
            logger.error("Command result 0x%02X: %s", code, reason.description)

        return CommandResult(success=success, reason=reason, code=code)
