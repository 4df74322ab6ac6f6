"""
Event catalog: lookup of event descriptions by (code, restore).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache

from satelink.models.records import EventCatalogEntry

logger = logging.getLogger(__name__)


class EventCatalog:
    """
    Read-only mapping from ``(code, restore)`` to catalog entries.

    The default catalog is built once from the bundled event table and
    shared; lookups never mutate it.

    Example:
        >>> catalog = EventCatalog.default()
        >>> catalog.lookup(99, False).text
        'Zone violation'
    """

    def __init__(self, entries: Iterable[EventCatalogEntry] = ()) -> None:
        self._entries: dict[tuple[int, bool], EventCatalogEntry] = {}
        for entry in entries:
            key = (entry.code, entry.restore)
            if key in self._entries:
                logger.warning(
                    "Duplicate catalog entry for code %d restore=%s, keeping first",
                    entry.code, entry.restore,
                )
                continue
            self._entries[key] = entry

    @classmethod
    def from_entries(cls, entries: Iterable[EventCatalogEntry]) -> "EventCatalog":
        """Build a catalog from prepared entries."""
        return cls(entries)

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[int, bool, int, str]]) -> "EventCatalog":
        """Build a catalog from ``(code, restore, category, text)`` rows."""
        return cls(
            EventCatalogEntry(code=code, restore=bool(restore), category=category, text=text.rstrip())
            for code, restore, category, text in rows
        )

    @classmethod
    def default(cls) -> "EventCatalog":
        """Get the shared catalog built from the bundled event table."""
        return _default_catalog()

    def lookup(self, code: int, restore: bool) -> EventCatalogEntry | None:
        """
        Find the entry for an event.

        Args:
            code: 10-bit event code.
            restore: Restore flag from the event record.

        Returns:
            The entry, or None when the catalog has no such event.
        """
        return self._entries.get((code, bool(restore)))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EventCatalogEntry]:
        return iter(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"EventCatalog(entries={len(self._entries)})"


@lru_cache(maxsize=1)
def _default_catalog() -> EventCatalog:
    from satelink.catalog.event_table import EVENT_TABLE

    catalog = EventCatalog.from_rows(EVENT_TABLE)
    logger.debug("Loaded event catalog with %d entries", len(catalog))
    return catalog
