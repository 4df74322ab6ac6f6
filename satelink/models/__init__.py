"""
Data models for decoded INTEGRA responses.

- Enums (MonitoringStatus, EventClass, ResultCode)
- Name, zone and door reports
- System status and version records
- Command results
- Event records and catalog entries
"""

from satelink.models.records import (
    CommandResult,
    DoorsReport,
    EventCatalogEntry,
    EventClass,
    EventRecord,
    ModuleVersion,
    MonitoringStatus,
    ObjectName,
    ResultCode,
    SystemStatus,
    VersionInfo,
    ZoneSet,
)

__all__ = [
    # Enums
    "MonitoringStatus",
    "EventClass",
    "ResultCode",
    # Records
    "ObjectName",
    "ZoneSet",
    "DoorsReport",
    "SystemStatus",
    "ModuleVersion",
    "VersionInfo",
    "CommandResult",
    "EventCatalogEntry",
    "EventRecord",
]
