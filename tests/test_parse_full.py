"""Tests for the format list parsers: parse_full_datetime, try_parse_date, parse_date."""

from __future__ import annotations

from datetime import datetime

import pytest

from dateserial.errors import FormatError, ParseError
from dateserial.parse import (
    parse_date,
    parse_full_datetime,
    try_parse_date,
    try_parse_full_datetime,
)

LAYOUT_CASES = [
    ("01/02/2020 10:20:30", "%d/%m/%Y %H:%M:%S", datetime(2020, 2, 1, 10, 20, 30)),
    ("01-02-2020 10:20:30", "%d-%m-%Y %H:%M:%S", datetime(2020, 2, 1, 10, 20, 30)),
    ("01.02.2020 10:20:30", "%d.%m.%Y %H:%M:%S", datetime(2020, 2, 1, 10, 20, 30)),
    ("01/02/2020 10:20", "%d/%m/%Y %H:%M", datetime(2020, 2, 1, 10, 20)),
    ("01-02-2020 10:20", "%d-%m-%Y %H:%M", datetime(2020, 2, 1, 10, 20)),
    ("01.02.2020 10:20", "%d.%m.%Y %H:%M", datetime(2020, 2, 1, 10, 20)),
    ("2020/02/01 10:20:30", "%Y/%m/%d %H:%M:%S", datetime(2020, 2, 1, 10, 20, 30)),
    ("2020-02-01 10:20:30", "%Y-%m-%d %H:%M:%S", datetime(2020, 2, 1, 10, 20, 30)),
    ("2020.02.01 10:20:30", "%Y.%m.%d %H:%M:%S", datetime(2020, 2, 1, 10, 20, 30)),
    ("2020/02/01 10:20", "%Y/%m/%d %H:%M", datetime(2020, 2, 1, 10, 20)),
    ("2020-02-01 10:20", "%Y-%m-%d %H:%M", datetime(2020, 2, 1, 10, 20)),
    ("2020.02.01 10:20", "%Y.%m.%d %H:%M", datetime(2020, 2, 1, 10, 20)),
]

NON_MATCHING = [
    "2020-02-01",
    "01/02/2020",
    "1/2/2020 10:20",
    "01/02/20 10:20",
    "2020-02-01T10:20:30",
    "01/02/2020 10:20:30.5",
    " 01/02/2020 10:20",
    "01/02/2020 10:20 ",
    "01/02-2020 10:20",
    "1700000000",
    "not-a-date",
    "",
]


class TestTryParseDate:
    """Tests for try_parse_date."""

    @pytest.mark.parametrize(("text", "layout", "expected"), LAYOUT_CASES)
    def test_each_layout(self, text: str, layout: str, expected: datetime) -> None:
        """Each layout family parses with the correct value."""
        result = try_parse_date(text)
        assert result.success is True
        assert result.value == expected
        assert result.strategy == f"exact {layout}"

    @pytest.mark.parametrize("text", NON_MATCHING)
    def test_non_matching(self, text: str) -> None:
        """Strings matching none of the layouts fail."""
        result = try_parse_date(text)
        assert result.success is False
        assert result.value is None

    def test_none(self) -> None:
        """None fails without raising."""
        assert not try_parse_date(None)  # type: ignore[arg-type]

    def test_results_are_naive(self) -> None:
        """Format list matches are local (naive) values."""
        assert try_parse_date("01/02/2020 10:20").value.tzinfo is None

    def test_invalid_calendar_date(self) -> None:
        """A well-formed but impossible date fails."""
        assert not try_parse_date("30/02/2020 10:20")

    def test_same_as_try_parse_full_datetime(self) -> None:
        """Both strict entry points share one chain."""
        for text, _, _ in LAYOUT_CASES:
            assert try_parse_date(text) == try_parse_full_datetime(text)


class TestParseFullDatetime:
    """Tests for parse_full_datetime."""

    def test_time_is_kept(self, default: datetime) -> None:
        """No truncation is applied."""
        assert parse_full_datetime("01.02.2020 10:20:30", default) == datetime(2020, 2, 1, 10, 20, 30)

    def test_first_layout_wins(self, default: datetime) -> None:
        """An ambiguous string is read day-first."""
        assert parse_full_datetime("03/04/2020 00:00", default) == datetime(2020, 4, 3)

    def test_default_on_failure(self, default: datetime) -> None:
        """Date-only strings are not accepted."""
        assert parse_full_datetime("2020-02-01", default) is default

    def test_no_general_fallback(self, default: datetime) -> None:
        """Strings the general parser would accept are still rejected."""
        assert parse_full_datetime("May 1, 2020 10:00", default) is default


class TestParseDate:
    """Tests for parse_date."""

    def test_success(self) -> None:
        """Returns the parsed value."""
        assert parse_date("15-01-2024 14:30:45") == datetime(2024, 1, 15, 14, 30, 45)

    def test_failure_raises_format_error(self) -> None:
        """No matching layout raises FormatError."""
        with pytest.raises(FormatError, match="does not match any known"):
            parse_date("2024-01-15")

    def test_format_error_is_parse_error(self) -> None:
        """FormatError can be caught as ParseError or ValueError."""
        with pytest.raises(ParseError):
            parse_date("garbage")
        with pytest.raises(ValueError):
            parse_date("garbage")

    def test_none_raises(self) -> None:
        """None raises FormatError too."""
        with pytest.raises(FormatError):
            parse_date(None)  # type: ignore[arg-type]
