"""Tests for named reporting windows."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from civiltime.domain.errors import InvalidDateError, InvalidRangeError
from civiltime.domain.ranges import (
    DEFAULT_RECENT_SCOPE,
    DEFAULT_SEARCH_RANGE,
    DateRange,
    RecentScope,
    SearchRange,
    parse_range_kind,
    resolve_range,
    today_in_zone,
)

TODAY = "2025-10-29"  # a Wednesday


class TestResolveRange:
    @pytest.mark.parametrize(
        ("kind", "begin", "end"),
        [
            ("wtd", "2025-10-26", TODAY),
            ("wtd_prev", "2025-10-19", TODAY),
            ("prev_week", "2025-10-19", "2025-10-25"),
            ("all_weeks", "2025-10-19", "2025-10-25"),
            ("mtd", "2025-10-01", TODAY),
            ("mtd_prev", "2025-09-01", TODAY),
            ("prev_month", "2025-09-01", "2025-09-30"),
            ("all_months", "2025-09-01", "2025-09-30"),
            ("all_records", None, None),
        ],
    )
    def test_windows_without_entry_bounds(
        self, kind: str, begin: str | None, end: str | None
    ) -> None:
        window = resolve_range(kind, TODAY)
        assert (window.begin, window.end) == (begin, end)

    def test_all_weeks_reaches_back_to_earliest_week(self) -> None:
        window = resolve_range("all_weeks", TODAY, earliest="2025-09-03")
        assert (window.begin, window.end) == ("2025-08-31", "2025-10-25")

    def test_all_months_reaches_back_to_earliest_month(self) -> None:
        window = resolve_range("all_months", TODAY, earliest="2025-06-15")
        assert (window.begin, window.end) == ("2025-06-01", "2025-09-30")

    def test_all_records_spans_entries(self) -> None:
        window = resolve_range("all_records", TODAY, earliest="2025-06-15", latest="2025-10-30")
        assert (window.begin, window.end) == ("2025-06-15", "2025-10-30")

    def test_previous_month_across_year(self) -> None:
        window = resolve_range("prev_month", "2025-01-15")
        assert (window.begin, window.end) == ("2024-12-01", "2024-12-31")

    def test_accepts_enum(self) -> None:
        assert resolve_range(SearchRange.WTD, TODAY).begin == "2025-10-26"

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidRangeError, match="expected one of"):
            resolve_range("fortnight", TODAY)

    def test_invalid_today(self) -> None:
        with pytest.raises(InvalidDateError):
            resolve_range("wtd", "2025-10-32")


class TestDateRange:
    def test_between_canonicalizes(self) -> None:
        window = DateRange.between("2025-10-01", "2025-10-31")
        assert window == DateRange(begin="2025-10-01", end="2025-10-31")

    def test_open_bounds(self) -> None:
        assert DateRange.between(None, "2025-10-31").begin is None
        assert DateRange.between("2025-10-01", None).end is None

    def test_begin_after_end(self) -> None:
        with pytest.raises(InvalidRangeError, match="after"):
            DateRange.between("2025-10-31", "2025-10-01")

    def test_malformed_bound(self) -> None:
        with pytest.raises(InvalidDateError):
            DateRange.between("2025-10-1", None)

    def test_frozen(self) -> None:
        window = DateRange(begin="2025-10-01")
        with pytest.raises(Exception):
            window.begin = "2025-11-01"  # type: ignore[misc]


class TestHelpers:
    def test_today_depends_on_zone(self) -> None:
        now = datetime(2025, 10, 30, 4, 31, tzinfo=UTC)
        assert today_in_zone("America/Los_Angeles", now=now) == "2025-10-29"
        assert today_in_zone("Asia/Kolkata", now=now) == "2025-10-30"

    def test_today_without_now(self) -> None:
        assert len(today_in_zone("UTC")) == 10

    def test_parse_range_kind(self) -> None:
        assert parse_range_kind("mtd_prev") is SearchRange.MTD_PREV

    def test_defaults(self) -> None:
        assert DEFAULT_SEARCH_RANGE is SearchRange.WTD_PREV
        assert DEFAULT_RECENT_SCOPE is RecentScope.WTD
        assert {s.value for s in RecentScope} <= {r.value for r in SearchRange}
