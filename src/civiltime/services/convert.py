"""ConvertService — local <-> UTC conversions for the CLI and collaborators.

Four read-only operations:
- to_utc: local date + wall clock in a zone -> UTC instant
- to_local: UTC instant -> local date + wall clock
- offset: the zone's UTC offset at an instant
- day_bounds: UTC interval covering a local day
"""

from __future__ import annotations

import logging

from civiltime.domain.civil import (
    format_civil_date,
    format_civil_time,
    parse_civil_date,
    parse_civil_time,
)
from civiltime.domain.convert import local_day_bounds, to_instant, to_local
from civiltime.domain.errors import CivilTimeError
from civiltime.domain.zones import offset_minutes
from civiltime.services.base import BaseService
from civiltime.services.result import ServiceResult, from_validation_error

logger = logging.getLogger(__name__)


def _format_offset(minutes: int) -> str:
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


class ConvertService(BaseService):
    """Wraps the conversion core in ServiceResult envelopes."""

    def to_utc(self, day: str, clock: str, *, tz: str | None = None) -> ServiceResult:
        """Convert a local date and time into a UTC instant."""
        zone = self._zone(tz)
        try:
            local_date = format_civil_date(parse_civil_date(day))
            local_time = format_civil_time(parse_civil_time(clock))
            instant = to_instant(local_date, local_time, zone)
            offset = offset_minutes(instant, zone)
        except CivilTimeError as exc:
            return from_validation_error("to_utc", exc)
        logger.debug("to_utc %s %s %s -> %s", local_date, local_time, zone, instant)
        return ServiceResult(
            ok=True,
            op="to_utc",
            data={
                "date": local_date,
                "time": local_time,
                "zone": zone,
                "instant": instant,
                "offset_minutes": offset,
                "offset": _format_offset(offset),
            },
        )

    def to_local(self, instant: str, *, tz: str | None = None) -> ServiceResult:
        """Project a UTC instant into a zone."""
        zone = self._zone(tz)
        try:
            local_date, local_time = to_local(instant, zone)
            offset = offset_minutes(instant, zone)
        except CivilTimeError as exc:
            return from_validation_error("to_local", exc)
        return ServiceResult(
            ok=True,
            op="to_local",
            data={
                "instant": instant,
                "zone": zone,
                "date": local_date,
                "time": local_time,
                "offset_minutes": offset,
                "offset": _format_offset(offset),
            },
        )

    def offset(self, instant: str, *, tz: str | None = None) -> ServiceResult:
        """Report a zone's offset at an instant."""
        zone = self._zone(tz)
        try:
            minutes = offset_minutes(instant, zone)
        except CivilTimeError as exc:
            return from_validation_error("offset", exc)
        return ServiceResult(
            ok=True,
            op="offset",
            data={
                "instant": instant,
                "zone": zone,
                "offset_minutes": minutes,
                "offset": _format_offset(minutes),
            },
        )

    def day_bounds(self, day: str, *, tz: str | None = None) -> ServiceResult:
        """UTC half-open interval covering a local day."""
        zone = self._zone(tz)
        try:
            local_date = format_civil_date(parse_civil_date(day))
            start, end = local_day_bounds(local_date, zone)
        except CivilTimeError as exc:
            return from_validation_error("day_bounds", exc)
        return ServiceResult(
            ok=True,
            op="day_bounds",
            data={"date": local_date, "zone": zone, "start": start, "end": end},
        )
