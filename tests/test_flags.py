"""Tests for line header flags."""

import re
from datetime import datetime, timedelta, timezone

import pytest

from huelog import flags
from huelog.flags import format_header

WHEN = datetime(2009, 1, 23, 1, 23, 23, 123123)


class TestFlagValues:
    """Test the bit assignments."""

    def test_std_flags_is_date_and_time(self):
        """✅ Test STD_FLAGS combines DATE and TIME."""
        assert flags.STD_FLAGS == flags.DATE | flags.TIME == 3

    def test_bits_are_distinct(self):
        """✅ Test each flag occupies its own bit."""
        bits = [
            flags.DATE,
            flags.TIME,
            flags.MICROSECONDS,
            flags.LONG_FILE,
            flags.SHORT_FILE,
            flags.UTC,
            flags.MSG_PREFIX,
        ]
        assert bits == [1, 2, 4, 8, 16, 32, 64]


class TestFormatHeader:
    """Test header rendering against a fixed timestamp."""

    @pytest.mark.parametrize(
        "bitmask,expected",
        [
            (0, ""),
            (flags.DATE, "2009/01/23 "),
            (flags.TIME, "01:23:23 "),
            (flags.STD_FLAGS, "2009/01/23 01:23:23 "),
            (flags.MICROSECONDS, "01:23:23.123123 "),
            (flags.TIME | flags.MICROSECONDS, "01:23:23.123123 "),
            (flags.DATE | flags.MICROSECONDS, "2009/01/23 01:23:23.123123 "),
            (flags.MSG_PREFIX, ""),
        ],
    )
    def test_date_time(self, bitmask, expected):
        """✅ Test date and time fields."""
        assert format_header(bitmask, when=WHEN) == expected

    def test_short_file(self):
        """✅ Test SHORT_FILE keeps only the final path element."""
        header = format_header(flags.SHORT_FILE, caller=("/srv/app/worker.py", 42))
        assert header == "worker.py:42: "

    def test_long_file(self):
        """✅ Test LONG_FILE keeps the full path."""
        header = format_header(flags.LONG_FILE, caller=("/srv/app/worker.py", 42))
        assert header == "/srv/app/worker.py:42: "

    def test_short_file_overrides_long_file(self):
        """✅ Test SHORT_FILE wins when both file flags are set."""
        header = format_header(
            flags.SHORT_FILE | flags.LONG_FILE, caller=("/srv/app/worker.py", 42)
        )
        assert header == "worker.py:42: "

    def test_file_without_caller(self):
        """✅ Test placeholder when no caller is known."""
        assert format_header(flags.SHORT_FILE) == "???:0: "

    def test_all_fields_order(self):
        """✅ Test date, then time, then file."""
        header = format_header(
            flags.STD_FLAGS | flags.SHORT_FILE, when=WHEN, caller=("a/b.py", 7)
        )
        assert header == "2009/01/23 01:23:23 b.py:7: "

    def test_utc_converts_aware_timestamp(self):
        """✅ Test UTC flag converts an aware timestamp to UTC."""
        plus_two = timezone(timedelta(hours=2))
        when = datetime(2009, 1, 23, 1, 23, 23, tzinfo=plus_two)
        header = format_header(flags.STD_FLAGS | flags.UTC, when=when)
        assert header == "2009/01/22 23:23:23 "

    def test_current_time_used_when_none_given(self):
        """✅ Test the header falls back to the current time."""
        header = format_header(flags.STD_FLAGS)
        assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} ", header)


class TestNeedsCaller:
    """Test detection of file flags."""

    @pytest.mark.parametrize(
        "bitmask,expected",
        [
            (0, False),
            (flags.STD_FLAGS, False),
            (flags.SHORT_FILE, True),
            (flags.LONG_FILE | flags.DATE, True),
        ],
    )
    def test_needs_caller(self, bitmask, expected):
        assert flags.needs_caller(bitmask) is expected
