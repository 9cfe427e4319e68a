"""Time zone offset resolution backed by the IANA database.

The platform's tz database (``zoneinfo``, with the ``tzdata`` package as a
fallback) is the only source of DST rules. Offsets are derived by
projecting an instant into the zone's wall clock and measuring how far
that wall clock sits from UTC, so no rule tables live in this package.
"""

from __future__ import annotations

from datetime import UTC, datetime
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from civiltime.domain.civil import InstantLike, format_instant, parse_instant
from civiltime.domain.errors import InvalidInstantError, InvalidZoneError

DEFAULT_ZONE = "UTC"


@lru_cache(maxsize=256)
def resolve_zone(name: str) -> ZoneInfo:
    """Look up *name* in the tz database.

    Raises :class:`InvalidZoneError` for empty or unknown identifiers.
    An absent user zone is the caller's problem: pass ``DEFAULT_ZONE``
    explicitly rather than relying on a fallback here.
    """
    key = name.strip() if isinstance(name, str) else ""
    if not key:
        msg = "Time zone is required"
        raise InvalidZoneError(msg, value=name)
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        msg = f"Unknown time zone: {name!r}"
        raise InvalidZoneError(msg, value=name) from exc


def wall_clock(instant: InstantLike, zone: str) -> datetime:
    """Project *instant* onto the zone's wall clock as a naive datetime."""
    moment = parse_instant(instant)
    tz = resolve_zone(zone)
    try:
        return moment.astimezone(tz).replace(tzinfo=None)
    except OverflowError as exc:
        msg = f"Instant {format_instant(moment)} has no wall-clock reading in {zone}"
        raise InvalidInstantError(msg, value=instant) from exc


def offset_minutes(instant: InstantLike, zone: str) -> int:
    """Signed UTC offset of *zone* at *instant*, in minutes.

    ``local = instant + offset``: Los Angeles in summer is ``-420``,
    Kolkata is ``+330``. The offset is measured by reading the projected
    wall clock back as if it were UTC and subtracting the instant.
    """
    moment = parse_instant(instant)
    local_as_utc = wall_clock(moment, zone).replace(tzinfo=UTC)
    seconds = (local_as_utc - moment).total_seconds()
    return round(seconds / 60)
