"""
Pydantic models for decoded INTEGRA responses.

This module defines the structured values produced by the decoders,
implemented as immutable Pydantic models with validation.

Design principles:
- All models are frozen (immutable)
- Field ranges mirror the bit widths of the wire format
- Values the panel did not report (unknown device type, missing catalog
  entry) are represented explicitly, never guessed
"""

from __future__ import annotations

from datetime import date, datetime
from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from satelink.protocol.constants import ObjectType


class MonitoringStatus(IntEnum):
    """Monitoring-station status of an event (2-bit field)."""

    NEW = 0
    """New event, not processed by the monitoring service."""

    SENT = 1
    """Event sent."""

    RESERVED = 2
    """Should not occur."""

    NOT_MONITORED = 3
    """Event not monitored."""

    @property
    def description(self) -> str:
        return _MONITORING_DESCRIPTIONS[self]


_MONITORING_DESCRIPTIONS = {
    MonitoringStatus.NEW: "new event, not processed by monitoring service",
    MonitoringStatus.SENT: "event sent",
    MonitoringStatus.RESERVED: "should not occur",
    MonitoringStatus.NOT_MONITORED: "event not monitored",
}


class EventClass(IntEnum):
    """Event class (3-bit KKK field)."""

    ZONE_AND_TAMPER_ALARMS = 0
    PARTITION_AND_EXPANDER_ALARMS = 1
    ARMING_DISARMING_ALARM_CLEARING = 2
    ZONE_BYPASSES = 3
    ACCESS_CONTROL = 4
    TROUBLES = 5
    USER_FUNCTIONS = 6
    SYSTEM_EVENTS = 7

    @property
    def description(self) -> str:
        return _EVENT_CLASS_DESCRIPTIONS[self]


_EVENT_CLASS_DESCRIPTIONS = {
    EventClass.ZONE_AND_TAMPER_ALARMS: "zone and tamper alarms",
    EventClass.PARTITION_AND_EXPANDER_ALARMS: "partition and expander alarms",
    EventClass.ARMING_DISARMING_ALARM_CLEARING: "arming, disarming, alarm clearing",
    EventClass.ZONE_BYPASSES: "zone bypasses and unbypasses",
    EventClass.ACCESS_CONTROL: "access control",
    EventClass.TROUBLES: "troubles",
    EventClass.USER_FUNCTIONS: "user functions",
    EventClass.SYSTEM_EVENTS: "system events",
}


class ResultCode(IntEnum):
    """Outcomes reported by the command result (0xEF) response."""

    OK = 0x00
    USER_CODE_NOT_FOUND = 0x01
    NO_ACCESS = 0x02
    USER_DOES_NOT_EXIST = 0x03
    USER_ALREADY_EXISTS = 0x04
    CODE_CONFLICT = 0x05
    PHONE_CODE_EXISTS = 0x06
    CODE_UNCHANGED = 0x07
    OTHER_ERROR = 0x08
    CANNOT_ARM_FORCE_AVAILABLE = 0x11
    CANNOT_ARM = 0x12
    ACCEPTED_PENDING = 0xFF

    @property
    def description(self) -> str:
        return _RESULT_DESCRIPTIONS[self]


_RESULT_DESCRIPTIONS = {
    ResultCode.OK: "ok",
    ResultCode.USER_CODE_NOT_FOUND: "requested user code not found",
    ResultCode.NO_ACCESS: "no access",
    ResultCode.USER_DOES_NOT_EXIST: "selected user does not exist",
    ResultCode.USER_ALREADY_EXISTS: "selected user already exists",
    ResultCode.CODE_CONFLICT: "wrong code or code already exists",
    ResultCode.PHONE_CODE_EXISTS: "telephone code already exists",
    ResultCode.CODE_UNCHANGED: "changed code is the same",
    ResultCode.OTHER_ERROR: "other error",
    ResultCode.CANNOT_ARM_FORCE_AVAILABLE: "can not arm, but can use force arm",
    ResultCode.CANNOT_ARM: "can not arm",
    ResultCode.ACCEPTED_PENDING: "command accepted (data length and crc ok), will be processed",
}


class ObjectName(BaseModel):
    """
    Name of a partition, zone, user, expander or output (0xEE reply).
    """

    model_config = ConfigDict(frozen=True)

    object_type: int = Field(ge=0, le=255, description="Object-type selector echoed by the panel")
    number: int = Field(ge=0, le=255, description="Object number byte")
    function: int = Field(ge=0, le=255, description="Object function/type byte")
    name: str = Field(description="Object name")
    partition: int | None = Field(default=None, description="Partition assignment (zone-with-partition)")

    @property
    def object_type_enum(self) -> ObjectType | None:
        try:
            return ObjectType(self.object_type)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.name


class ZoneSet(BaseModel):
    """
    Zones flagged in a zone bitmap report, with their resolved names.
    """

    model_config = ConfigDict(frozen=True)

    opcode: int = Field(ge=0, le=0x08, description="Report opcode (violation, tamper, ...)")
    zones: dict[int, str] = Field(default_factory=dict, description="Zone number -> name")
    bitmap_size: int = Field(description="Bitmap length in bytes (16 or 32)")

    @property
    def numbers(self) -> frozenset[int]:
        """Flagged zone numbers."""
        return frozenset(self.zones)

    def __len__(self) -> int:
        return len(self.zones)

    def __contains__(self, zone: object) -> bool:
        return zone in self.zones


class DoorsReport(BaseModel):
    """
    Doors opened / opened long report. The bitmap is not decoded.
    """

    model_config = ConfigDict(frozen=True)

    opcode: int = Field(description="0x18 or 0x19")
    raw_data: str = Field(description="Payload as hex")


class SystemStatus(BaseModel):
    """
    Clock and basic system status (0x1A reply).
    """

    model_config = ConfigDict(frozen=True)

    device_type: str = Field(description="INTEGRA type name")
    device_type_id: int = Field(ge=0, le=15, description="Low nibble of the type byte")
    clock: datetime = Field(description="Panel clock")
    weekday: str = Field(description="Weekday name reported by the panel")
    service_mode: bool
    troubles: bool
    acu100_present: bool
    intrx_present: bool
    troubles_memory: bool
    grade3_set: bool

    @property
    def datetime_text(self) -> str:
        """Clock formatted as ``YYYY-MM-DD Weekday hh:mm:ss``."""
        return f"{self.clock:%Y-%m-%d} {self.weekday} {self.clock:%H:%M:%S}"


class ModuleVersion(BaseModel):
    """
    INT-RS / ETHM-1 module version (0x7C reply).
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(description="Version, e.g. '1.23 2012-05-27'")
    can_serve_32_bytes: bool = Field(description="Module serves 32-byte zone/output bitmaps")


class VersionInfo(BaseModel):
    """
    INTEGRA panel type and firmware version (0x7E reply).
    """

    model_config = ConfigDict(frozen=True)

    device_type: str = Field(description="Panel type name")
    device_type_id: int = Field(ge=0, le=255)
    zones: int | str = Field(description="Zone capacity, '?' when unknown")
    outputs: int | str = Field(description="Output capacity, '?' when unknown")
    version: str = Field(description="Firmware version, e.g. '1.12 2013-11-08'")
    language: int = Field(ge=0, le=255, description="Language code")
    language_name: str | None = Field(default=None, description="Language, when known")
    flashed: bool = Field(description="Settings stored in flash")


class CommandResult(BaseModel):
    """
    Result of a control command (0xEF reply).
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    reason: ResultCode
    code: int = Field(ge=0, le=255, description="Raw result byte")

    @property
    def message(self) -> str:
        return self.reason.description


class EventCatalogEntry(BaseModel):
    """
    One row of the event catalog: (code, restore) -> (category, text).
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field(ge=0, le=1023, description="10-bit event code")
    restore: bool = Field(description="Restore (end) variant of the event")
    category: int = Field(ge=0, description="Kind of long description")
    text: str = Field(description="Event description")


class EventRecord(BaseModel):
    """
    One event-log record (0x8C reply).
    """

    model_config = ConfigDict(frozen=True)

    year_mod4: int = Field(ge=0, le=3, description="Year modulo 4 hint")
    not_empty: bool
    event_present: bool
    s1_status: MonitoringStatus
    s2_status: MonitoringStatus
    event_class: EventClass
    day: int = Field(ge=0, le=31)
    month: int = Field(ge=0, le=15)
    hour: int = Field(ge=0)
    minute: int = Field(ge=0, le=59)
    partition: int = Field(ge=0, le=31)
    restore: bool
    code: int = Field(ge=0, le=1023, description="10-bit event code")
    category: int | None = Field(default=None, description="Catalog category id")
    text: str | None = Field(default=None, description="Catalog description")
    source: int = Field(ge=0, le=255, description="Zone/user/output number")
    object_number: int = Field(ge=0, le=7, description="Object/partition group")
    user_control: int = Field(ge=0, le=31, description="User-control number")
    index: Annotated[str, Field(pattern=r"^[0-9A-F]{6}$")] | None = Field(
        default=None, description="Event index as hex, None when the reply carried none"
    )

    @property
    def date_text(self) -> str:
        """Date as ``DD/MM``."""
        return f"{self.day:02d}/{self.month:02d}"

    @property
    def time_text(self) -> str:
        """Time as ``hh:mm``."""
        return f"{self.hour:02d}:{self.minute:02d}"

    def resolve_year(self, today: date | None = None) -> int:
        """
        Get the most recent year, not after ``today``, matching the hint.

        Args:
            today: Reference date (default: today).

        Returns:
            Full year.
        """
        reference = today or date.today()
        return reference.year - ((reference.year - self.year_mod4) % 4)
