"""Standalone command: entry report with weekly totals."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilCommand
from civiltime.domain.ranges import SearchRange
from civiltime.services.report import ReportService

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext


@click.command(
    cls=CivilCommand,
    examples="""\
  civiltime report entries.json
  civiltime report entries.json --range prev_month --tz America/Los_Angeles
  civiltime report entries.json --recent
  civiltime report entries.json --begin 2025-10-01 --end 2025-10-31 --site clinic
  civiltime report entries.jsonl --event Consult --event Charting --no-totals
  civiltime --json report entries.json --range all_records""",
)
@click.argument("entries_path", metavar="FILE", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--range",
    "range_kind",
    type=click.Choice([r.value for r in SearchRange]),
    default=None,
    help="Named window (default: [search] default_range).",
)
@click.option(
    "--recent",
    is_flag=True,
    help="Use the [recent] scope window (wtd, wtd_prev, mtd or mtd_prev).",
)
@click.option("--begin", default=None, help="Custom window start (YYYY-MM-DD).")
@click.option("--end", default=None, help="Custom window end (YYYY-MM-DD).")
@click.option("--today", default=None, help="Anchor date for named windows.")
@click.option(
    "--site",
    type=click.Choice(["clinic", "remote"]),
    default=None,
    help="Keep only entries from this site.",
)
@click.option("--event", "events", multiple=True, help="Require an event type (repeatable).")
@click.option(
    "--totals/--no-totals",
    default=None,
    help="Show weekly totals (default: [search] show_weekly_totals).",
)
@click.option("--tz", default=None, help="IANA zone used to date entries.")
@click.pass_obj
def report(
    app: AppContext,
    entries_path: Path,
    range_kind: str | None,
    recent: bool,
    begin: str | None,
    end: str | None,
    today: str | None,
    site: str | None,
    events: tuple[str, ...],
    totals: bool | None,
    tz: str | None,
) -> None:
    """List entries from FILE inside a date window, with weekly totals."""
    if recent and (range_kind or begin or end):
        msg = "--recent cannot be combined with --range, --begin or --end"
        raise click.UsageError(msg)
    svc = ReportService(app.settings)
    result = svc.report(
        entries_path,
        range_kind=range_kind,
        recent=recent,
        begin=begin,
        end=end,
        today=today,
        site=site,
        events=events,
        totals=totals,
        tz=tz,
    )
    app.emit(result)
