"""Named reporting windows for search and recent-entry views.

Every window is an inclusive ``[begin, end]`` pair of local dates resolved
relative to "today" in the user's zone. The ``all_*`` windows reach back
to the earliest known entry, so callers pass the bounds of their data.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel

from civiltime.domain.calendar import (
    add_days,
    last_day_of_previous_month,
    month_start,
    previous_month_start,
    week_start,
)
from civiltime.domain.civil import CivilDateLike, format_civil_date, parse_civil_date
from civiltime.domain.convert import to_local_date
from civiltime.domain.errors import InvalidRangeError


class SearchRange(StrEnum):
    """Default date windows for the search screen."""

    WTD = "wtd"
    WTD_PREV = "wtd_prev"
    PREV_WEEK = "prev_week"
    ALL_WEEKS = "all_weeks"
    MTD = "mtd"
    MTD_PREV = "mtd_prev"
    PREV_MONTH = "prev_month"
    ALL_MONTHS = "all_months"
    ALL_RECORDS = "all_records"


class RecentScope(StrEnum):
    """Windows allowed for the recent-entries list."""

    WTD = "wtd"
    WTD_PREV = "wtd_prev"
    MTD = "mtd"
    MTD_PREV = "mtd_prev"


DEFAULT_SEARCH_RANGE = SearchRange.WTD_PREV
DEFAULT_RECENT_SCOPE = RecentScope.WTD


class DateRange(BaseModel):
    """Inclusive local-date window; a ``None`` bound is open-ended."""

    model_config = {"frozen": True}

    begin: str | None = None
    end: str | None = None

    @classmethod
    def between(cls, begin: CivilDateLike | None, end: CivilDateLike | None) -> DateRange:
        """Build a validated window from user input.

        Raises :class:`InvalidRangeError` when *begin* is after *end*.
        """
        b = format_civil_date(parse_civil_date(begin)) if begin else None
        e = format_civil_date(parse_civil_date(end)) if end else None
        if b and e and b > e:
            msg = f"Range begin {b} is after end {e}"
            raise InvalidRangeError(msg, value=(b, e))
        return cls(begin=b, end=e)


def today_in_zone(zone: str, now: datetime | None = None) -> str:
    """Today's local date in *zone*."""
    return to_local_date(now or datetime.now(UTC), zone)


def parse_range_kind(kind: str) -> SearchRange:
    """Validate a window name."""
    try:
        return SearchRange(kind)
    except ValueError as exc:
        allowed = ", ".join(r.value for r in SearchRange)
        msg = f"Unknown range {kind!r} (expected one of: {allowed})"
        raise InvalidRangeError(msg, value=kind) from exc


def resolve_range(
    kind: str,
    today: CivilDateLike,
    *,
    earliest: str | None = None,
    latest: str | None = None,
) -> DateRange:
    """Resolve a named window relative to *today*.

    *earliest* and *latest* are the local-date bounds of the caller's
    entries; only the ``all_*`` windows consult them.
    """
    window = parse_range_kind(kind)
    day = format_civil_date(parse_civil_date(today))
    this_week = week_start(day)
    prev_week_begin = add_days(this_week, -7)
    prev_week_end = add_days(this_week, -1)

    match window:
        case SearchRange.WTD:
            return DateRange(begin=this_week, end=day)
        case SearchRange.WTD_PREV:
            return DateRange(begin=prev_week_begin, end=day)
        case SearchRange.PREV_WEEK:
            return DateRange(begin=prev_week_begin, end=prev_week_end)
        case SearchRange.ALL_WEEKS:
            begin = week_start(earliest) if earliest else prev_week_begin
            return DateRange(begin=begin, end=prev_week_end)
        case SearchRange.MTD:
            return DateRange(begin=month_start(day), end=day)
        case SearchRange.MTD_PREV:
            return DateRange(begin=previous_month_start(day), end=day)
        case SearchRange.PREV_MONTH:
            return DateRange(
                begin=previous_month_start(day),
                end=last_day_of_previous_month(day),
            )
        case SearchRange.ALL_MONTHS:
            begin = month_start(earliest) if earliest else previous_month_start(day)
            return DateRange(begin=begin, end=last_day_of_previous_month(day))
        case SearchRange.ALL_RECORDS:
            return DateRange(begin=earliest, end=latest)
