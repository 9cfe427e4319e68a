"""Command group: week/month buckets and reporting windows."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilGroup
from civiltime.domain.ranges import SearchRange
from civiltime.services.calendar import CalendarService

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext

_CALENDAR_EXAMPLES = """\
  civiltime calendar week 2025-10-29
  civiltime calendar month 2025-01-15
  civiltime calendar range mtd_prev --today 2025-10-29
  civiltime calendar range all_weeks --entries entries.json"""


@click.group(cls=CivilGroup, examples=_CALENDAR_EXAMPLES)
@click.pass_obj
def calendar(app: AppContext) -> None:
    """Calendar buckets and named date windows."""


@calendar.command(
    examples="""\
  civiltime calendar week 2025-10-29
  civiltime -q calendar week 2025-11-01""",
)
@click.argument("day", metavar="DATE")
@click.pass_obj
def week(app: AppContext, day: str) -> None:
    """Show the Sunday-Saturday week containing DATE."""
    app.emit(CalendarService(app.settings).week(day))


@calendar.command(
    examples="""\
  civiltime calendar month 2025-01-15
  civiltime --json calendar month 2024-03-31""",
)
@click.argument("day", metavar="DATE")
@click.pass_obj
def month(app: AppContext, day: str) -> None:
    """Show month boundaries around DATE."""
    app.emit(CalendarService(app.settings).month(day))


@calendar.command(
    name="range",
    examples="""\
  civiltime calendar range
  civiltime calendar range wtd --today 2025-10-29
  civiltime calendar range all_months --entries entries.json --tz America/Chicago""",
)
@click.argument("kind", required=False, type=click.Choice([r.value for r in SearchRange]))
@click.option("--today", default=None, help="Anchor date (default: today in the zone).")
@click.option(
    "--entries",
    "entries_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Entries file bounding the all_* windows.",
)
@click.option("--tz", default=None, help="IANA zone for today and entry dates.")
@click.pass_obj
def range_cmd(
    app: AppContext,
    kind: str | None,
    today: str | None,
    entries_path: Path | None,
    tz: str | None,
) -> None:
    """Resolve a named window (default: [search] default_range)."""
    svc = CalendarService(app.settings)
    app.emit(svc.window(kind, today=today, entries_path=entries_path, tz=tz))
