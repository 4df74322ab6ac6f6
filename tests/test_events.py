"""Tests for event record decoding."""

from datetime import date

import pytest

from satelink.catalog import EventCatalog
from satelink.decoders import EventRecordDecoder, parse_event
from satelink.decoders.events import minute_of_day
from satelink.exceptions import ParseError
from satelink.models import EventClass, MonitoringStatus
from satelink.protocol import Response

# Zone 5 violation in partition 1 on 15/06 at 10:00
ZONE_VIOLATION = bytes.fromhex("300F62580863050000ABCD")


class TestParseEvent:
    """Tests for parse_event."""

    @pytest.fixture
    def catalog(self):
        return EventCatalog.default()

    def test_short_payload_raises(self):
        """Test fewer than 8 bytes is a ParseError, not a validation error."""
        with pytest.raises(ParseError) as exc_info:
            parse_event(ZONE_VIOLATION[:5])
        assert exc_info.value.opcode == 0x8C

    def test_partial_index_is_dropped(self):
        assert parse_event(ZONE_VIOLATION[:10]).index is None

    def test_zone_violation(self, catalog):
        """Test every field of a known record."""
        record = parse_event(ZONE_VIOLATION, catalog)

        assert record.year_mod4 == 0
        assert record.not_empty is True
        assert record.event_present is True
        assert record.s1_status is MonitoringStatus.NEW
        assert record.s2_status is MonitoringStatus.NEW
        assert record.event_class is EventClass.ZONE_AND_TAMPER_ALARMS
        assert record.date_text == "15/06"
        assert record.time_text == "10:00"
        assert record.partition == 1
        assert record.restore is False
        assert record.code == 99
        assert record.text == "Zone violation"
        assert record.category == 1
        assert record.source == 5
        assert record.object_number == 0
        assert record.user_control == 0
        assert record.index == "00ABCD"

    def test_restore_and_high_code_bits(self):
        """Test the restore flag and the two high code bits."""
        payload = bytes.fromhex("3F4A1234" "0E05" "11" "E3") + b"\x01\x02\x03"

        record = parse_event(payload)

        assert record.year_mod4 == 0
        assert record.s2_status is MonitoringStatus.NOT_MONITORED
        assert record.s1_status is MonitoringStatus.NOT_MONITORED
        assert record.event_class is EventClass.ARMING_DISARMING_ALARM_CLEARING
        assert record.day == 10
        assert record.month == 1
        assert record.partition == 1
        assert record.restore is True
        assert record.code == 517
        assert record.source == 0x11
        assert record.object_number == 7
        assert record.user_control == 3
        assert record.index == "010203"

    def test_year_and_status_bits(self):
        """Test year hint and separate S1/S2 statuses."""
        record = parse_event(bytes.fromhex("D6E10000000000000000FF"))

        assert record.year_mod4 == 3
        assert record.not_empty is False
        assert record.event_present is True
        assert record.s2_status is MonitoringStatus.SENT
        assert record.s1_status is MonitoringStatus.RESERVED
        assert record.event_class is EventClass.SYSTEM_EVENTS
        assert record.day == 1

    def test_catalog_miss_leaves_text_empty(self, catalog):
        """Test events missing from the catalog keep category and text None."""
        payload = bytes.fromhex("30010000" "07FF" "00" "00") + b"\x00\x00\x01"

        record = parse_event(payload, catalog)

        assert record.code == 1023
        assert record.restore is True
        assert record.category is None
        assert record.text is None

    def test_without_catalog(self):
        record = parse_event(ZONE_VIOLATION)
        assert record.code == 99
        assert record.text is None


class TestMinuteOfDay:
    """Tests for the 12-bit minute-of-day assembly."""

    def test_ten_o_clock(self):
        assert minute_of_day(0x62, 0x58) == 600

    def test_low_bit_comes_from_byte3(self):
        """Test byte 4 bit 0 is ignored and byte 3 bit 0 used instead."""
        assert minute_of_day(0x00, 0x01) == 0
        assert minute_of_day(0x01, 0x00) == 257

    def test_last_minute(self):
        # 23:59 = 1439 = 0x59F; byte 3 bit 0 is 1
        record = parse_event(bytes.fromhex("3001059E000000000000FF"))
        assert record.time_text == "23:59"


class TestResolveYear:
    """Tests for EventRecord.resolve_year."""

    @pytest.mark.parametrize(
        "year_byte,expected",
        [
            (0x30, 2024),
            (0x70, 2025),
            (0xB0, 2026),
            (0xF0, 2023),
        ],
    )
    def test_most_recent_matching_year(self, year_byte, expected):
        payload = bytes([year_byte]) + ZONE_VIOLATION[1:]
        record = parse_event(payload)
        assert record.resolve_year(date(2026, 10, 19)) == expected


class TestEventRecordDecoder:
    """Tests for the 0x8C decoder."""

    @pytest.mark.asyncio
    async def test_uses_client_catalog(self, client):
        record = await EventRecordDecoder().decode(Response(0x8C, ZONE_VIOLATION), client)
        assert record.text == "Zone violation"

    @pytest.mark.asyncio
    async def test_record_without_index(self, client):
        """Test an 8-byte record decodes with no index."""
        record = await EventRecordDecoder().decode(Response(0x8C, ZONE_VIOLATION[:8]), client)
        assert record.index is None
        assert record.text == "Zone violation"

    @pytest.mark.asyncio
    async def test_short_payload_raises(self, client):
        with pytest.raises(ParseError):
            await EventRecordDecoder().decode(Response(0x8C, ZONE_VIOLATION[:7]), client)
