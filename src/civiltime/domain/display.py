"""Short display forms for dates and durations."""

from __future__ import annotations

from civiltime.domain.civil import CivilDateLike, format_civil_date, parse_civil_date

_WEEKDAYS = ("Mon.", "Tue.", "Wed.", "Thu.", "Fri.", "Sat.", "Sun.")
EMPTY = "—"


def format_mmdd(day: CivilDateLike) -> str:
    """``2025-10-29`` -> ``10/29``."""
    canonical = format_civil_date(parse_civil_date(day))
    return f"{canonical[5:7]}/{canonical[8:10]}"


def format_day_month(day: CivilDateLike) -> str:
    """``2025-10-29`` -> ``Wed. : 10-29``."""
    parsed = parse_civil_date(day)
    return f"{_WEEKDAYS[parsed.weekday()]} : {parsed.month:02d}-{parsed.day:02d}"


def format_duration(minutes: int | None) -> str:
    """Minutes as ``H:MM``; unknown durations render as a dash."""
    if minutes is None:
        return EMPTY
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours}:{mins:02d}"
