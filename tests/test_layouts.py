"""Tests for the format list and canonical formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from dateserial.format import (
    DEFAULT_DATE_FORMAT,
    FORMATS,
    FULL_FORMAT,
    format_date_only,
    format_full,
)
from dateserial.parse import parse_date


class TestFormatList:
    """Tests for the FORMATS constant."""

    def test_has_twelve_layouts(self) -> None:
        """The list holds twelve distinct layouts."""
        assert len(FORMATS) == 12
        assert len(set(FORMATS)) == 12

    def test_day_first_layouts_come_first(self) -> None:
        """All day-first layouts precede the year-first ones."""
        assert all(fmt.startswith("%d") for fmt in FORMATS[:6])
        assert all(fmt.startswith("%Y") for fmt in FORMATS[6:])

    def test_seconds_before_minutes(self) -> None:
        """Within each family the layouts with seconds come first."""
        for family in (FORMATS[:6], FORMATS[6:]):
            assert all(fmt.endswith("%S") for fmt in family[:3])
            assert all(fmt.endswith("%H:%M") for fmt in family[3:])

    def test_separators(self) -> None:
        """Each group covers the slash, dash and dot separators."""
        for start in range(0, 12, 3):
            assert [FORMATS[start + i][2] for i in range(3)] == ["/", "-", "."]

    def test_canonical_layouts(self) -> None:
        """The canonical layouts are fixed."""
        assert DEFAULT_DATE_FORMAT == "%Y-%m-%d"
        assert FULL_FORMAT == "%d/%m/%Y %H:%M:%S"


class TestFormatFull:
    """Tests for format_full."""

    def test_format(self) -> None:
        """Renders day/month/year hour:minute:second."""
        assert format_full(datetime(2020, 2, 1, 10, 5, 9)) == "01/02/2020 10:05:09"

    def test_drops_microseconds(self) -> None:
        """Sub-second precision is not rendered."""
        assert format_full(datetime(2020, 2, 1, 10, 5, 9, 999_999)) == "01/02/2020 10:05:09"

    def test_aware_value_keeps_wall_clock(self) -> None:
        """Aware values are rendered at their own offset."""
        tz = timezone(timedelta(hours=9))
        assert format_full(datetime(2020, 2, 1, 23, 0, 0, tzinfo=tz)) == "01/02/2020 23:00:00"

    def test_parse_date_reads_output(self) -> None:
        """The canonical full layout is the first entry of the format list."""
        value = datetime(2021, 12, 3, 4, 5, 6)
        assert parse_date(format_full(value)) == value


class TestFormatDateOnly:
    """Tests for format_date_only."""

    def test_format(self) -> None:
        """Renders year-month-day."""
        assert format_date_only(datetime(2020, 2, 1, 10, 5, 9)) == "2020-02-01"

    def test_small_year(self) -> None:
        """Four-digit years are zero padded."""
        assert format_date_only(datetime(999, 1, 1)) == "0999-01-01"


@pytest.mark.parametrize("fmt", FORMATS)
def test_every_layout_reads_its_own_output(fmt: str) -> None:
    """Each layout parses what it formats."""
    from dateserial.format import strftime, strptime

    value = datetime(2023, 7, 4, 18, 45, 30 if fmt.endswith("%S") else 0)
    assert strptime(strftime(value, fmt), fmt) == value
