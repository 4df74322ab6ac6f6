"""Tests for the event catalog."""

import pytest

from satelink.catalog import EventCatalog
from satelink.catalog.event_table import EVENT_TABLE
from satelink.models import EventCatalogEntry


class TestDefaultCatalog:
    """Tests for the bundled catalog."""

    @pytest.fixture
    def catalog(self):
        return EventCatalog.default()

    def test_loaded_once(self):
        """Test the default catalog is shared."""
        assert EventCatalog.default() is EventCatalog.default()

    def test_size_matches_table(self, catalog):
        assert len(catalog) == len(EVENT_TABLE)

    def test_zone_violation_and_restore(self, catalog):
        """Test the same code has distinct restore entries."""
        assert catalog.lookup(99, False).text == "Zone violation"
        assert catalog.lookup(99, True).text == "Zone restore"
        assert catalog.lookup(99, False).category == 1

    def test_texts_are_trimmed(self, catalog):
        """Test no description keeps trailing whitespace."""
        assert all(entry.text == entry.text.rstrip() for entry in catalog)

    def test_miss_returns_none(self, catalog):
        assert catalog.lookup(1023, True) is None

    def test_contains(self, catalog):
        assert (99, False) in catalog
        assert (1023, True) not in catalog

    def test_codes_fit_ten_bits(self, catalog):
        assert all(0 <= entry.code <= 1023 for entry in catalog)


class TestCustomCatalog:
    """Tests for catalogs built from rows or entries."""

    def test_from_rows_strips_text(self):
        catalog = EventCatalog.from_rows([(7, False, 6, "Custom event   ")])
        assert catalog.lookup(7, False).text == "Custom event"

    def test_from_entries(self):
        entry = EventCatalogEntry(code=1, restore=True, category=2, text="Door open")
        catalog = EventCatalog.from_entries([entry])
        assert catalog.lookup(1, True) is entry
        assert catalog.lookup(1, False) is None

    def test_duplicate_keeps_first(self):
        catalog = EventCatalog.from_rows([
            (5, False, 0, "First"),
            (5, False, 0, "Second"),
        ])
        assert len(catalog) == 1
        assert catalog.lookup(5, False).text == "First"

    def test_lookup_accepts_truthy_restore(self):
        catalog = EventCatalog.from_rows([(5, True, 0, "Restored")])
        assert catalog.lookup(5, 1).text == "Restored"

    def test_repr(self):
        assert repr(EventCatalog()) == "EventCatalog(entries=0)"
