"""CalendarService — week/month buckets and named reporting windows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from civiltime.domain.calendar import (
    add_days,
    last_day_of_previous_month,
    month_start,
    previous_month_start,
    week_end,
    week_start,
)
from civiltime.domain.civil import format_civil_date, parse_civil_date
from civiltime.domain.errors import CivilTimeError
from civiltime.domain.ranges import resolve_range, today_in_zone
from civiltime.domain.totals import date_bounds
from civiltime.domain.zones import resolve_zone
from civiltime.services._helpers import load_entries
from civiltime.services.base import BaseService
from civiltime.services.result import ServiceResult, from_validation_error

if TYPE_CHECKING:
    from pathlib import Path

    from civiltime.domain.entries import TimeEntry

logger = logging.getLogger(__name__)


class CalendarService(BaseService):
    """Calendar arithmetic exposed as ServiceResult operations."""

    def week(self, day: str) -> ServiceResult:
        """Sunday-Saturday week containing *day*."""
        try:
            canonical = format_civil_date(parse_civil_date(day))
            start = week_start(canonical)
            data = {
                "date": canonical,
                "week_start": start,
                "week_end": week_end(start),
                "previous_week_start": add_days(start, -7),
            }
        except CivilTimeError as exc:
            return from_validation_error("week", exc)
        return ServiceResult(ok=True, op="week", data=data)

    def month(self, day: str) -> ServiceResult:
        """Month boundaries around *day*."""
        try:
            canonical = format_civil_date(parse_civil_date(day))
            data = {
                "date": canonical,
                "month_start": month_start(canonical),
                "previous_month_start": previous_month_start(canonical),
                "last_day_of_previous_month": last_day_of_previous_month(canonical),
            }
        except CivilTimeError as exc:
            return from_validation_error("month", exc)
        return ServiceResult(ok=True, op="month", data=data)

    def window(
        self,
        kind: str | None = None,
        *,
        today: str | None = None,
        entries_path: Path | None = None,
        tz: str | None = None,
    ) -> ServiceResult:
        """Resolve a named reporting window.

        Args:
            kind: Window name; defaults to ``[search] default_range``.
            today: Anchor date; defaults to today in the zone.
            entries_path: Entries file supplying bounds for ``all_*`` windows.
            tz: Zone for "today" and for dating entries.
        """
        op = "window"
        zone = self._zone(tz)
        try:
            resolve_zone(zone)
        except CivilTimeError as exc:
            return from_validation_error(op, exc)
        range_kind = kind or self._settings.search.default_range.value
        earliest: str | None = None
        latest: str | None = None
        warnings: list[str] = []

        entries: list[TimeEntry] = []
        if entries_path is not None:
            entries, error = load_entries(entries_path, op)
            if error is not None:
                return error

        try:
            if entries_path is not None:
                earliest, latest = date_bounds(entries, zone)
                if earliest is None:
                    warnings.append("No dated entries found; using default bounds")
            anchor = today or today_in_zone(zone)
            window = resolve_range(range_kind, anchor, earliest=earliest, latest=latest)
        except CivilTimeError as exc:
            return from_validation_error(op, exc)

        logger.debug("window %s anchored at %s -> %s", range_kind, anchor, window)
        data: dict[str, Any] = {
            "range": range_kind,
            "today": anchor,
            "zone": zone,
            "begin": window.begin,
            "end": window.end,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

