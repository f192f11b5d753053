"""Tests for month key helpers."""

from datetime import date

import pytest

from tools.months import is_month_key, month_key, parse_month_key, shift_month


class TestMonthKey:
    """Tests for month_key and parse_month_key."""

    def test_month_key_pads_month(self):
        """Test that months are zero padded."""
        assert month_key(date(2024, 3, 31)) == "2024-03"
        assert month_key(date(2024, 12, 1)) == "2024-12"

    def test_month_key_defaults_to_today(self):
        """Test that month_key() uses today's date."""
        today = date.today()
        assert month_key() == f"{today.year:04d}-{today.month:02d}"

    def test_parse_month_key(self):
        """Test parsing to the first day of the month."""
        assert parse_month_key("2024-01") == date(2024, 1, 1)

    @pytest.mark.parametrize("key", ["2024-1", "2024-13", "2024-00", "24-01", "", "lastMonth"])
    def test_parse_invalid_key_raises(self, key):
        """Test that malformed keys raise ValueError."""
        with pytest.raises(ValueError, match="Invalid month key"):
            parse_month_key(key)

    def test_is_month_key(self):
        """Test the boolean validity check."""
        assert is_month_key("2024-01")
        assert not is_month_key("lastMonth")


class TestShiftMonth:
    """Tests for shift_month."""

    def test_next_month(self):
        assert shift_month("2024-01", 1) == "2024-02"

    def test_previous_month_across_year(self):
        assert shift_month("2024-01", -1) == "2023-12"

    def test_next_month_across_year(self):
        assert shift_month("2023-12", 1) == "2024-01"

    def test_multiple_months(self):
        assert shift_month("2024-11", 14) == "2026-01"

    def test_no_month_skipped_from_long_month(self):
        """Test that moving from January never skips February."""
        assert month_key(date(2024, 1, 31)) == "2024-01"
        assert shift_month(month_key(date(2024, 1, 31)), 1) == "2024-02"
