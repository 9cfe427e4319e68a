"""Time entries and their normalized date/duration view.

A stored entry may carry UTC start/stop instants, an explicit local start
date, and an explicit duration, in any combination:

- active entry: start instant, no stop instant
- timed entry: start and stop instants
- manual duration entry: local date + duration, no instants

This module never mutates entries. It derives the values that the storage
and API collaborators persist or display.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from civiltime.domain.calendar import week_start
from civiltime.domain.civil import format_instant, parse_instant
from civiltime.domain.convert import normalize_civil_date, to_local, to_local_date

_MINUTE_MS = 60_000


class TimeEntry(BaseModel):
    """Time-relevant fields of a stored entry.

    Accepts the storage/API column names (``start_utc``, ``start_iso``,
    ``duration_min``) as aliases. Unknown columns are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int | str | None = None
    site: str | None = None
    events: list[str] = Field(default_factory=list)
    notes: str | None = None
    start_instant: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("start_instant", "start_iso", "start_utc"),
    )
    stop_instant: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("stop_instant", "stop_iso", "stop_utc"),
    )
    start_local_date: str | date | None = None
    duration_minutes: int | None = Field(
        default=None,
        validation_alias=AliasChoices("duration_minutes", "duration_min"),
    )

    @field_validator("start_instant", "stop_instant", mode="before")
    @classmethod
    def _require_offset(cls, value: Any) -> datetime | None:
        if value is None or value == "":
            return None
        return parse_instant(value)


class NormalizedEntry(BaseModel):
    """Display/bucketing view of one entry in a specific zone."""

    model_config = {"frozen": True}

    id: int | str | None = None
    site: str | None = None
    events: list[str] = Field(default_factory=list)
    local_date: str | None = None
    week_start: str | None = None
    start: str | None = None
    stop: str | None = None
    start_time: str | None = None
    stop_time: str | None = None
    duration_minutes: int | None = None
    active: bool = False
    manual: bool = False


def is_active(entry: TimeEntry) -> bool:
    """Started and not yet stopped."""
    return entry.start_instant is not None and entry.stop_instant is None


def is_manual(entry: TimeEntry) -> bool:
    """Duration-only entry with no instants."""
    return (
        entry.start_instant is None
        and entry.stop_instant is None
        and entry.duration_minutes is not None
    )


def effective_local_date(entry: TimeEntry, zone: str) -> str | None:
    """The local date an entry is bucketed under.

    Precedence: a well-formed stored ``start_local_date``, then the start
    instant projected into *zone*. ``None`` means the entry has no date
    and must be left out of date-bucketed views.
    """
    stored = normalize_civil_date(entry.start_local_date, zone)
    if stored is not None:
        return stored
    if entry.start_instant is not None:
        return to_local_date(entry.start_instant, zone)
    return None


def effective_duration_minutes(entry: TimeEntry) -> int | None:
    """Duration in whole minutes, or ``None`` when unknown.

    An explicit ``duration_minutes`` always wins, even when it is zero or
    disagrees with the instants: it may have been edited by hand. Otherwise
    the start/stop delta is rounded half-up to the minute and clamped at
    zero.
    """
    if entry.duration_minutes is not None:
        return entry.duration_minutes
    if entry.start_instant is None or entry.stop_instant is None:
        return None
    elapsed_ms = (entry.stop_instant - entry.start_instant) // timedelta(milliseconds=1)
    return max(0, (elapsed_ms + _MINUTE_MS // 2) // _MINUTE_MS)


def normalize_entry(entry: TimeEntry, zone: str) -> NormalizedEntry:
    """Bundle every derived field for *entry* as seen from *zone*."""
    local_date = effective_local_date(entry, zone)
    start_time = to_local(entry.start_instant, zone)[1] if entry.start_instant else None
    stop_time = to_local(entry.stop_instant, zone)[1] if entry.stop_instant else None
    return NormalizedEntry(
        id=entry.id,
        site=entry.site,
        events=list(entry.events),
        local_date=local_date,
        week_start=week_start(local_date) if local_date else None,
        start=format_instant(entry.start_instant) if entry.start_instant else None,
        stop=format_instant(entry.stop_instant) if entry.stop_instant else None,
        start_time=start_time,
        stop_time=stop_time,
        duration_minutes=effective_duration_minutes(entry),
        active=is_active(entry),
        manual=is_manual(entry),
    )
