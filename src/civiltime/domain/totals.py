"""Range filtering and weekly totals over time entries."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from civiltime.domain.calendar import is_within, week_end, week_start
from civiltime.domain.entries import TimeEntry, effective_duration_minutes, effective_local_date
from civiltime.domain.ranges import DateRange


class WeekTotal(BaseModel):
    """Summed minutes for one Sunday-Saturday week."""

    model_config = {"frozen": True}

    week_start: str
    week_end: str
    minutes: int = 0
    entry_count: int = 0


class GrandTotal(BaseModel):
    """Summed minutes across every dated entry."""

    model_config = {"frozen": True}

    begin: str
    end: str
    minutes: int = 0
    entry_count: int = 0


def date_bounds(entries: Iterable[TimeEntry], zone: str) -> tuple[str | None, str | None]:
    """Earliest and latest effective local dates, ignoring undated entries."""
    days = [d for d in (effective_local_date(e, zone) for e in entries) if d]
    if not days:
        return None, None
    return min(days), max(days)


def filter_entries(
    entries: Iterable[TimeEntry],
    zone: str,
    window: DateRange,
    *,
    site: str | None = None,
    events: Iterable[str] | None = None,
) -> list[TimeEntry]:
    """Entries whose local date falls in *window*.

    Undated entries are always excluded. *events* keeps only entries
    tagged with every listed event type.
    """
    wanted = set(events or ())
    kept: list[TimeEntry] = []
    for entry in entries:
        day = effective_local_date(entry, zone)
        if day is None or not is_within(day, window.begin, window.end):
            continue
        if site and entry.site != site:
            continue
        if wanted and not wanted.issubset(entry.events):
            continue
        kept.append(entry)
    return kept


def weekly_totals(entries: Iterable[TimeEntry], zone: str) -> list[WeekTotal]:
    """Group entries by week, in order of each week's first appearance.

    Unknown durations (active entries) count as zero minutes.
    """
    buckets: dict[str, dict[str, int]] = {}
    for entry in entries:
        day = effective_local_date(entry, zone)
        if day is None:
            continue
        bucket = buckets.setdefault(week_start(day), {"minutes": 0, "entry_count": 0})
        bucket["minutes"] += effective_duration_minutes(entry) or 0
        bucket["entry_count"] += 1
    return [
        WeekTotal(week_start=start, week_end=week_end(start), **bucket)
        for start, bucket in buckets.items()
    ]


def grand_total(entries: Iterable[TimeEntry], zone: str) -> GrandTotal | None:
    """Total minutes and date span across all dated entries."""
    dated = [(effective_local_date(e, zone), e) for e in entries]
    dated = [(day, e) for day, e in dated if day is not None]
    if not dated:
        return None
    days = [day for day, _ in dated]
    return GrandTotal(
        begin=min(days),
        end=max(days),
        minutes=sum(effective_duration_minutes(e) or 0 for _, e in dated),
        entry_count=len(dated),
    )
