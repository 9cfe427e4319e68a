"""Canonical codecs for CivilDate, CivilTime, and Instant values.

Boundary forms:
- CivilDate: ``YYYY-MM-DD`` (zero padded, no zone)
- CivilTime: ``HH:MM`` (24-hour, no date, no zone)
- Instant:   ``YYYY-MM-DDTHH:MM:SS.sssZ`` (UTC, millisecond precision)

INVARIANT: for canonical CivilDate strings, lexicographic order is
chronological order. Everything that compares dates relies on it.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time

from civiltime.domain.errors import InvalidDateError, InvalidInstantError, InvalidTimeError

CIVIL_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
CIVIL_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

type CivilDateLike = str | date
type CivilTimeLike = str | time
type InstantLike = str | datetime


# ---------------------------------------------------------------------------
# CivilDate
# ---------------------------------------------------------------------------


def parse_civil_date(value: CivilDateLike) -> date:
    """Parse a strict ``YYYY-MM-DD`` string (or pass a ``date`` through).

    ``datetime`` values are rejected: a date with a clock attached is an
    instant in disguise and must go through the converter instead.
    """
    if isinstance(value, datetime):
        msg = f"Expected a calendar date, got a datetime: {value!r}"
        raise InvalidDateError(msg, value=value)
    if isinstance(value, date):
        return value
    match = CIVIL_DATE_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        msg = f"Invalid date {value!r}: expected YYYY-MM-DD"
        raise InvalidDateError(msg, value=value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        msg = f"Invalid date {value!r}: {exc}"
        raise InvalidDateError(msg, value=value) from exc


def format_civil_date(value: date) -> str:
    """Render a date as canonical ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def is_civil_date(value: object) -> bool:
    """True when *value* is a well-formed canonical CivilDate string."""
    if not isinstance(value, str):
        return False
    try:
        parse_civil_date(value)
    except InvalidDateError:
        return False
    return True


# ---------------------------------------------------------------------------
# CivilTime
# ---------------------------------------------------------------------------


def parse_civil_time(value: CivilTimeLike) -> time:
    """Parse ``HH:MM`` (also ``H:MM`` and ``HH:MM:SS``) into a wall-clock time.

    Seconds are accepted for convenience and dropped; a CivilTime has
    minute resolution.
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    match = CIVIL_TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        msg = f"Invalid time {value!r}: expected HH:MM"
        raise InvalidTimeError(msg, value=value)
    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        msg = f"Invalid time {value!r}: out of range 00:00-23:59"
        raise InvalidTimeError(msg, value=value)
    return time(hour, minute)


def format_civil_time(value: time) -> str:
    """Render a wall-clock time as canonical ``HH:MM``."""
    return f"{value.hour:02d}:{value.minute:02d}"


# ---------------------------------------------------------------------------
# Instant
# ---------------------------------------------------------------------------


def parse_instant(value: InstantLike) -> datetime:
    """Parse an ISO-8601 timestamp with an explicit offset into aware UTC.

    Naive timestamps are rejected: without an offset there is no way to
    tell which instant was meant.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            msg = f"Invalid instant {value!r}: expected ISO-8601 with offset"
            raise InvalidInstantError(msg, value=value) from exc
    else:
        msg = f"Invalid instant {value!r}: expected ISO-8601 string"
        raise InvalidInstantError(msg, value=value)
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        msg = f"Invalid instant {value!r}: missing UTC offset"
        raise InvalidInstantError(msg, value=value)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as exc:
        msg = f"Invalid instant {value!r}: outside the supported range"
        raise InvalidInstantError(msg, value=value) from exc


def format_instant(value: datetime) -> str:
    """Render an aware datetime as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Sub-millisecond digits are truncated, not rounded.
    """
    if value.tzinfo is None:
        msg = f"Cannot format naive datetime {value!r} as an instant"
        raise InvalidInstantError(msg, value=value)
    try:
        utc = value.astimezone(UTC)
    except OverflowError as exc:
        msg = f"Instant {value!r} is outside the supported range"
        raise InvalidInstantError(msg, value=value) from exc
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{utc.microsecond // 1000:03d}Z"
    )
