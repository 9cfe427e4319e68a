"""ReportService — dated entry listing with weekly and grand totals.

Reads an entries file, buckets every entry under its effective local date
in the requested zone, filters to a reporting window, and sums durations
per Sunday-Saturday week.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from civiltime.domain.entries import is_active, normalize_entry
from civiltime.domain.errors import CivilTimeError
from civiltime.domain.ranges import DateRange, resolve_range, today_in_zone
from civiltime.domain.totals import date_bounds, filter_entries, grand_total, weekly_totals
from civiltime.domain.zones import resolve_zone
from civiltime.services._helpers import load_entries
from civiltime.services.base import BaseService
from civiltime.services.result import ServiceResult, from_validation_error

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CUSTOM_RANGE = "custom"


class ReportService(BaseService):
    """Builds entry reports from an exported entries file."""

    def report(
        self,
        entries_path: Path,
        *,
        range_kind: str | None = None,
        recent: bool = False,
        begin: str | None = None,
        end: str | None = None,
        today: str | None = None,
        site: str | None = None,
        events: Sequence[str] = (),
        totals: bool | None = None,
        tz: str | None = None,
    ) -> ServiceResult:
        """List entries inside a window, with optional weekly totals.

        Args:
            entries_path: JSON/JSONL file of entry records.
            range_kind: Named window; ignored when *begin* or *end* is set.
                Defaults to ``[search] default_range``.
            recent: Use the ``[recent] scope`` window instead of the
                search default when no other window is given.
            begin: Inclusive start date for a custom window.
            end: Inclusive end date for a custom window.
            today: Anchor date for named windows; defaults to today.
            site: Keep only entries recorded at this site.
            events: Keep only entries tagged with all of these events.
            totals: Include weekly/grand totals; defaults to
                ``[search] show_weekly_totals``.
            tz: Zone used to date entries.
        """
        op = "report"
        zone = self._zone(tz)
        try:
            resolve_zone(zone)
        except CivilTimeError as exc:
            return from_validation_error(op, exc)

        entries, error = load_entries(entries_path, op)
        if error is not None:
            return error

        try:
            if begin or end:
                label = CUSTOM_RANGE
                window = DateRange.between(begin, end)
            else:
                label = range_kind or self._default_kind(recent=recent)
                earliest, latest = date_bounds(entries, zone)
                anchor = today or today_in_zone(zone)
                window = resolve_range(label, anchor, earliest=earliest, latest=latest)
            selected = filter_entries(entries, zone, window, site=site, events=events)
            normalized = [normalize_entry(e, zone) for e in selected]
        except CivilTimeError as exc:
            return from_validation_error(op, exc)

        order = sorted(
            range(len(selected)),
            key=lambda i: (normalized[i].local_date or "", normalized[i].start or ""),
            reverse=True,
        )
        selected = [selected[i] for i in order]
        normalized = [normalized[i] for i in order]

        data: dict[str, Any] = {
            "range": label,
            "begin": window.begin,
            "end": window.end,
            "zone": zone,
            "count": len(normalized),
            "items": [n.model_dump() for n in normalized],
        }

        show_totals = self._settings.search.show_weekly_totals if totals is None else totals
        if show_totals:
            data["weeks"] = [w.model_dump() for w in weekly_totals(selected, zone)]
            overall = grand_total(selected, zone)
            data["grand_total"] = overall.model_dump() if overall else None

        warnings: list[str] = []
        active = sum(1 for e in selected if is_active(e))
        if active:
            noun = "entry" if active == 1 else "entries"
            warnings.append(f"{active} active {noun} counted as 0 minutes")

        logger.debug(
            "report %s [%s, %s] kept %d of %d entries",
            label,
            window.begin,
            window.end,
            len(selected),
            len(entries),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
            meta={"total_entries": len(entries)},
        )

    def _default_kind(self, *, recent: bool) -> str:
        if recent:
            return self._settings.recent.scope.value
        return self._settings.search.default_range.value
