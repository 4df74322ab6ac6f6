"""
Logging helpers.

Modules log through ``logging.getLogger(__name__)``. The two classic switches
(logging on/off, debug verbosity on/off) are applied to a logger subtree by
``gated_logger``, instead of global state.
"""

from __future__ import annotations

import logging

SILENT = logging.CRITICAL + 1
"""Level above every standard level; a logger set to it emits nothing."""


class LevelGate(logging.Filter):
    """
    Filter with two independent toggles.

    - ``enabled=False`` drops every record.
    - ``debug=False`` drops DEBUG records, keeping INFO and above.
    """

    def __init__(self, enabled: bool = True, debug: bool = False) -> None:
        super().__init__()
        self.enabled = enabled
        self.debug = debug

    @property
    def level(self) -> int:
        """Lowest level the gate lets through."""
        if not self.enabled:
            return SILENT
        return logging.DEBUG if self.debug else logging.INFO

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self.level


def gated_logger(
    name: str = "satelink",
    enabled: bool = True,
    debug: bool = False,
) -> logging.Logger:
    """
    Get a logger whose subtree obeys a LevelGate.

    The gate is installed on the logger and on its handlers, and the
    logger level is set from the toggles. Child loggers left at NOTSET
    (every ``satelink.*`` module logger) inherit that level, so
    ``gated_logger("satelink", enabled=False)`` silences the package.
    Calling this again replaces the previous gate and level.

    Args:
        name: Logger name.
        enabled: Emit anything at all.
        debug: Emit DEBUG records (frame dumps).

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    gate = LevelGate(enabled=enabled, debug=debug)
    for target in (logger, *logger.handlers):
        for existing in [f for f in target.filters if isinstance(f, LevelGate)]:
            target.removeFilter(existing)
        target.addFilter(gate)
    logger.setLevel(gate.level)
    return logger
