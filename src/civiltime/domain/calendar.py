"""Calendar bucketing over civil dates.

Pure date arithmetic on calendar fields. No zone is involved: by the time
a value reaches these functions it is already a local date, and turning it
back into an instant would only reintroduce DST ambiguity.

Weeks run Sunday through Saturday.
"""

from __future__ import annotations

from datetime import date, timedelta

from civiltime.domain.civil import CivilDateLike, format_civil_date, parse_civil_date
from civiltime.domain.errors import InvalidDateError


def _shift(day: date, n: int) -> str:
    try:
        return format_civil_date(day + timedelta(days=n))
    except OverflowError as exc:
        msg = f"{format_civil_date(day)} shifted by {n} days is outside the supported range"
        raise InvalidDateError(msg, value=format_civil_date(day)) from exc


def add_days(day: CivilDateLike, n: int) -> str:
    """Shift *day* by *n* calendar days (negative *n* goes back)."""
    return _shift(parse_civil_date(day), n)


def week_start(day: CivilDateLike) -> str:
    """The Sunday on or before *day*."""
    parsed = parse_civil_date(day)
    # date.weekday(): Monday=0 ... Sunday=6
    days_since_sunday = (parsed.weekday() + 1) % 7
    return _shift(parsed, -days_since_sunday)


def week_end(day: CivilDateLike) -> str:
    """The Saturday closing *day*'s week."""
    return add_days(week_start(day), 6)


def month_start(day: CivilDateLike) -> str:
    """First day of *day*'s month."""
    return format_civil_date(parse_civil_date(day).replace(day=1))


def last_day_of_previous_month(day: CivilDateLike) -> str:
    """The day before :func:`month_start`."""
    return add_days(month_start(day), -1)


def previous_month_start(day: CivilDateLike) -> str:
    """First day of the month before *day*'s month.

    Examples:
        >>> previous_month_start("2025-01-15")
        '2024-12-01'
    """
    return month_start(last_day_of_previous_month(day))


def compare_dates(a: CivilDateLike, b: CivilDateLike) -> int:
    """Three-way comparison: -1, 0, or 1."""
    left = format_civil_date(parse_civil_date(a))
    right = format_civil_date(parse_civil_date(b))
    return (left > right) - (left < right)


def is_within(day: str, begin: str | None, end: str | None) -> bool:
    """Inclusive ``begin <= day <= end`` on canonical strings.

    Either bound may be ``None`` for an open-ended range.
    """
    if begin and day < begin:
        return False
    return not (end and day > end)
