"""
Session configuration.

Timing, sizing and decoding options are grouped in an immutable pydantic
model so that a session can be built from a dict or a settings file and
validated once.

Example:
    >>> config = SessionConfig(read_timeout=10.0, persistent=True)
    >>> config.min_send_interval
    1.0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from satelink.protocol.constants import ProtocolConstants


class SessionConfig(BaseModel):
    """
    Configuration for a TransportSession and the decoders it feeds.
    """

    model_config = ConfigDict(frozen=True)

    min_send_interval: float = Field(
        default=ProtocolConstants.MIN_SEND_INTERVAL,
        ge=0,
        description="Minimum seconds between two transmissions",
    )
    connect_timeout: float = Field(
        default=ProtocolConstants.CONNECT_TIMEOUT,
        gt=0,
        description="Connect timeout in seconds",
    )
    read_timeout: float = Field(
        default=ProtocolConstants.READ_TIMEOUT,
        gt=0,
        description="Reply timeout in seconds",
    )
    max_response_size: int = Field(
        default=ProtocolConstants.MAX_RESPONSE_SIZE,
        ge=16,
        description="Largest reply accepted, in bytes",
    )
    busy_retry_delay: float = Field(
        default=ProtocolConstants.BUSY_RETRY_DELAY,
        ge=0,
        description="First delay before resubmitting after Busy",
    )
    busy_backoff_factor: float = Field(
        default=ProtocolConstants.BUSY_BACKOFF_FACTOR,
        ge=1,
        description="Delay multiplier applied after each Busy retry",
    )
    busy_max_delay: float = Field(
        default=ProtocolConstants.BUSY_MAX_DELAY,
        ge=0,
        description="Upper bound for a single Busy delay",
    )
    busy_max_retries: int = Field(
        default=ProtocolConstants.BUSY_MAX_RETRIES,
        ge=0,
        description="Maximum resubmissions after Busy",
    )
    persistent: bool = Field(
        default=False,
        description="Keep the connection open between commands",
    )
    unstuff_inbound: bool = Field(
        default=True,
        description="Unstuff FE F0 pairs in replies before checksum validation",
    )
    strip_names: bool = Field(
        default=True,
        description="Trim trailing whitespace from object names",
    )

    @model_validator(mode="after")
    def check_delays(self) -> SessionConfig:
        """Ensure the busy delay cap is not below the first delay."""
        if self.busy_max_delay < self.busy_retry_delay:
            raise ValueError("busy_max_delay must be >= busy_retry_delay")
        return self

    @classmethod
    def legacy(cls) -> SessionConfig:
        """
        Settings matching legacy ETHM-1 clients as closely as is safe.

        The 100-byte reply cap and missing inbound unstuffing are
        reproduced; the busy retry stays bounded.
        """
        return cls(
            max_response_size=ProtocolConstants.LEGACY_READ_SIZE,
            busy_backoff_factor=1.0,
            busy_max_delay=ProtocolConstants.BUSY_RETRY_DELAY,
            unstuff_inbound=False,
            strip_names=False,
        )
