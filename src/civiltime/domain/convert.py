"""Local calendar date + wall clock <-> UTC instant conversion.

Forward conversion (local -> UTC) has to solve for an offset that itself
depends on the unknown instant. It does so by fixed-point iteration over
:func:`offset_minutes`, starting from the naive "local is UTC" guess.
Two passes are enough for every real zone: the offset only changes in
discrete DST steps.

Skipped local times (spring-forward gap) and repeated ones (fall-back
overlap) are not detected. They resolve to whatever instant the iteration
lands on, and no warning is raised.

Inverse conversion (UTC -> local) is a direct projection and is always
unambiguous.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from civiltime.domain.calendar import add_days
from civiltime.domain.civil import (
    CivilDateLike,
    CivilTimeLike,
    InstantLike,
    format_civil_date,
    format_civil_time,
    format_instant,
    is_civil_date,
    parse_civil_date,
    parse_civil_time,
)
from civiltime.domain.errors import InvalidDateError, InvalidInstantError
from civiltime.domain.zones import DEFAULT_ZONE, offset_minutes, resolve_zone, wall_clock

MAX_PASSES = 2


def _solve_utc(local: datetime, zone: str) -> datetime:
    """Find the UTC instant whose wall clock in *zone* reads *local*."""
    base = local.replace(tzinfo=UTC)
    guess = base
    try:
        for _ in range(MAX_PASSES):
            corrected = base - timedelta(minutes=offset_minutes(guess, zone))
            if corrected == guess:
                break
            guess = corrected
    except (OverflowError, InvalidInstantError) as exc:
        day = format_civil_date(local.date())
        msg = f"{day} {local:%H:%M} in {zone} is outside the supported range"
        raise InvalidDateError(msg, value=day) from exc
    return guess


def to_instant(day: CivilDateLike, clock: CivilTimeLike, zone: str) -> str:
    """Convert a local date and wall-clock time in *zone* to a UTC instant.

    Examples:
        >>> to_instant("2025-10-29", "21:31", "America/Los_Angeles")
        '2025-10-30T04:31:00.000Z'
        >>> to_instant("2025-10-29", "21:31", "Asia/Kolkata")
        '2025-10-29T16:01:00.000Z'
    """
    resolve_zone(zone)
    local = datetime.combine(parse_civil_date(day), parse_civil_time(clock))
    return format_instant(_solve_utc(local, zone))


def to_local(instant: InstantLike, zone: str) -> tuple[str, str]:
    """Project a UTC instant into *zone* as ``(YYYY-MM-DD, HH:MM)``."""
    local = wall_clock(instant, zone)
    return format_civil_date(local.date()), format_civil_time(local.time())


def to_local_date(instant: InstantLike, zone: str) -> str:
    """The calendar date *instant* falls on in *zone*."""
    return to_local(instant, zone)[0]


def to_local_time(instant: InstantLike, zone: str) -> str:
    """The ``HH:MM`` wall-clock reading of *instant* in *zone*."""
    return to_local(instant, zone)[1]


def local_day_bounds(day: CivilDateLike, zone: str) -> tuple[str, str]:
    """UTC half-open interval ``[start, end)`` covering one local day.

    The interval is 23 or 25 hours long on DST transition days.
    """
    return range_to_instants(day, day, zone)


def range_to_instants(begin: CivilDateLike, end: CivilDateLike, zone: str) -> tuple[str, str]:
    """UTC half-open interval covering local days *begin* through *end*."""
    first = parse_civil_date(begin)
    after_last = add_days(end, 1)
    return to_instant(first, "00:00", zone), to_instant(after_last, "00:00", zone)


def normalize_civil_date(value: object, zone: str = DEFAULT_ZONE) -> str | None:
    """Leniently read a stored local date into canonical ``YYYY-MM-DD``.

    - canonical date strings and ``date`` objects pass through
    - ISO strings containing ``T`` keep their leading date part
    - other timestamps are projected into *zone* (naive ones read as UTC)
    - anything else, including empty values, yields ``None``
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=UTC)
        return to_local_date(moment, zone)
    if isinstance(value, date):
        return format_civil_date(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if is_civil_date(text):
        return text
    if "T" in text:
        head = text[:10]
        return head if is_civil_date(head) else None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return normalize_civil_date(parsed, zone)

