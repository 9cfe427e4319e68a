"""Tests for entry date and duration normalization."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from civiltime.domain.entries import (
    TimeEntry,
    effective_duration_minutes,
    effective_local_date,
    is_active,
    is_manual,
    normalize_entry,
)

LA = "America/Los_Angeles"
KOLKATA = "Asia/Kolkata"


def _entry(**fields: object) -> TimeEntry:
    return TimeEntry.model_validate(fields)


class TestTimeEntry:
    def test_storage_aliases(self) -> None:
        entry = _entry(
            start_utc="2025-10-30T04:31:00.000Z",
            stop_iso="2025-10-30T05:31:00.000Z",
            duration_min=5,
            unknown_column="ignored",
        )
        assert entry.start_instant == datetime(2025, 10, 30, 4, 31, tzinfo=UTC)
        assert entry.stop_instant == datetime(2025, 10, 30, 5, 31, tzinfo=UTC)
        assert entry.duration_minutes == 5

    def test_field_names_accepted(self) -> None:
        entry = TimeEntry(start_local_date="2025-10-28", duration_minutes=30)
        assert entry.duration_minutes == 30

    def test_empty_instant_is_none(self) -> None:
        assert _entry(start_utc="", stop_utc=None).start_instant is None

    def test_naive_instant_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _entry(start_utc="2025-10-30T04:31:00")

    def test_frozen(self) -> None:
        entry = _entry(duration_min=5)
        with pytest.raises(ValidationError):
            entry.duration_minutes = 10  # type: ignore[misc]


class TestPredicates:
    def test_active(self) -> None:
        entry = _entry(start_utc="2025-10-30T04:31:00Z")
        assert is_active(entry)
        assert not is_manual(entry)

    def test_timed(self) -> None:
        entry = _entry(start_utc="2025-10-30T04:31:00Z", stop_utc="2025-10-30T05:31:00Z")
        assert not is_active(entry)
        assert not is_manual(entry)

    def test_manual(self) -> None:
        entry = _entry(start_local_date="2025-10-28", duration_min=30)
        assert is_manual(entry)
        assert not is_active(entry)


class TestEffectiveLocalDate:
    def test_stored_date_wins(self) -> None:
        entry = _entry(start_local_date="2025-10-28", start_utc="2025-10-30T04:31:00Z")
        assert effective_local_date(entry, LA) == "2025-10-28"

    def test_instant_projected_into_zone(self) -> None:
        entry = _entry(start_utc="2025-10-30T04:31:00Z")
        assert effective_local_date(entry, LA) == "2025-10-29"
        assert effective_local_date(entry, KOLKATA) == "2025-10-30"

    def test_malformed_stored_date_falls_back(self) -> None:
        entry = _entry(start_local_date="10/29/2025", start_utc="2025-10-30T04:31:00Z")
        assert effective_local_date(entry, LA) == "2025-10-29"

    def test_stored_date_object(self) -> None:
        entry = TimeEntry(start_local_date=date(2025, 10, 28))
        assert effective_local_date(entry, LA) == "2025-10-28"

    def test_no_date(self) -> None:
        assert effective_local_date(_entry(notes="orphan"), LA) is None


class TestEffectiveDuration:
    def test_explicit_duration_wins_over_instants(self) -> None:
        entry = _entry(
            start_utc="2025-10-31T16:00:00Z",
            stop_utc="2025-10-31T17:00:00Z",
            duration_min=45,
        )
        assert effective_duration_minutes(entry) == 45

    def test_explicit_zero_wins(self) -> None:
        entry = _entry(
            start_utc="2025-10-31T16:00:00Z",
            stop_utc="2025-10-31T17:00:00Z",
            duration_min=0,
        )
        assert effective_duration_minutes(entry) == 0

    def test_derived_from_instants(self) -> None:
        entry = _entry(start_utc="2025-10-30T04:31:00Z", stop_utc="2025-10-30T05:31:00Z")
        assert effective_duration_minutes(entry) == 60

    def test_derived_across_fall_back(self) -> None:
        # 01:00 PDT to 01:00 PST is two real hours
        entry = _entry(start_utc="2025-11-02T08:00:00Z", stop_utc="2025-11-02T10:00:00Z")
        assert effective_duration_minutes(entry) == 120

    @pytest.mark.parametrize(
        ("stop", "expected"),
        [
            ("2025-10-30T04:00:29.999Z", 0),
            ("2025-10-30T04:00:30.000Z", 1),
            ("2025-10-30T04:01:29.999Z", 1),
            ("2025-10-30T04:01:30.000Z", 2),
        ],
    )
    def test_rounds_half_up(self, stop: str, expected: int) -> None:
        entry = _entry(start_utc="2025-10-30T04:00:00.000Z", stop_utc=stop)
        assert effective_duration_minutes(entry) == expected

    def test_stop_before_start_clamps_to_zero(self) -> None:
        entry = _entry(start_utc="2025-10-30T05:00:00Z", stop_utc="2025-10-30T04:00:00Z")
        assert effective_duration_minutes(entry) == 0

    def test_active_is_unknown(self) -> None:
        assert effective_duration_minutes(_entry(start_utc="2025-10-30T04:31:00Z")) is None

    def test_nothing_known(self) -> None:
        assert effective_duration_minutes(_entry()) is None


class TestNormalizeEntry:
    def test_timed_entry(self) -> None:
        entry = _entry(
            id=1,
            site="clinic",
            events=["Consult"],
            start_utc="2025-10-30T04:31:00.000Z",
            stop_utc="2025-10-30T05:31:00.000Z",
        )
        normalized = normalize_entry(entry, LA)
        assert normalized.local_date == "2025-10-29"
        assert normalized.week_start == "2025-10-26"
        assert normalized.start == "2025-10-30T04:31:00.000Z"
        assert normalized.stop == "2025-10-30T05:31:00.000Z"
        assert normalized.start_time == "21:31"
        assert normalized.stop_time == "22:31"
        assert normalized.duration_minutes == 60
        assert normalized.active is False
        assert normalized.manual is False
        assert normalized.events == ["Consult"]

    def test_manual_entry(self) -> None:
        normalized = normalize_entry(_entry(start_local_date="2025-10-28", duration_min=30), LA)
        assert normalized.local_date == "2025-10-28"
        assert normalized.start is None
        assert normalized.start_time is None
        assert normalized.manual is True

    def test_undated_entry(self) -> None:
        normalized = normalize_entry(_entry(duration_min=15), LA)
        assert normalized.local_date is None
        assert normalized.week_start is None
