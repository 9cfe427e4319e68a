"""Command group: conversions between local wall clocks and UTC."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilGroup
from civiltime.services.convert import ConvertService

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext

_CONVERT_EXAMPLES = """\
  civiltime convert to-utc 2025-10-29 21:31 --tz America/Los_Angeles
  civiltime convert to-local 2025-10-30T04:31:00.000Z --tz America/New_York
  civiltime convert offset 2025-11-02T11:30:00.000Z --tz America/Los_Angeles
  civiltime convert day-bounds 2025-11-02 --tz America/Los_Angeles"""

_TZ_HELP = "IANA zone (default: [zone] default, or the root --tz)."


@click.group(cls=CivilGroup, examples=_CONVERT_EXAMPLES)
@click.pass_obj
def convert(app: AppContext) -> None:
    """Convert between local dates/times and UTC instants."""


@convert.command(
    name="to-utc",
    examples="""\
  civiltime convert to-utc 2025-11-02 03:30 --tz America/Los_Angeles
  civiltime --json convert to-utc 2025-10-29 21:31 --tz Asia/Kolkata
  civiltime -q convert to-utc 2025-10-29 09:00""",
)
@click.argument("day", metavar="DATE")
@click.argument("clock", metavar="TIME")
@click.option("--tz", default=None, help=_TZ_HELP)
@click.pass_obj
def to_utc(app: AppContext, day: str, clock: str, tz: str | None) -> None:
    """Convert a local DATE (YYYY-MM-DD) and TIME (HH:MM) to a UTC instant."""
    app.emit(ConvertService(app.settings).to_utc(day, clock, tz=tz))


@convert.command(
    name="to-local",
    examples="""\
  civiltime convert to-local 2025-10-30T04:31:00.000Z --tz America/Los_Angeles
  civiltime -q convert to-local 2025-11-02T09:30:00+00:00""",
)
@click.argument("instant")
@click.option("--tz", default=None, help=_TZ_HELP)
@click.pass_obj
def to_local(app: AppContext, instant: str, tz: str | None) -> None:
    """Show the local date and time of a UTC INSTANT."""
    app.emit(ConvertService(app.settings).to_local(instant, tz=tz))


@convert.command(
    examples="""\
  civiltime convert offset 2025-07-01T12:00:00Z --tz Europe/Berlin
  civiltime -q convert offset 2025-01-01T12:00:00Z --tz Asia/Kolkata""",
)
@click.argument("instant")
@click.option("--tz", default=None, help=_TZ_HELP)
@click.pass_obj
def offset(app: AppContext, instant: str, tz: str | None) -> None:
    """Show a zone's UTC offset at INSTANT."""
    app.emit(ConvertService(app.settings).offset(instant, tz=tz))


@convert.command(
    name="day-bounds",
    examples="""\
  civiltime convert day-bounds 2025-11-02 --tz America/Los_Angeles
  civiltime --json convert day-bounds 2025-03-09 --tz America/New_York""",
)
@click.argument("day", metavar="DATE")
@click.option("--tz", default=None, help=_TZ_HELP)
@click.pass_obj
def day_bounds(app: AppContext, day: str, tz: str | None) -> None:
    """Show the UTC interval covering local DATE."""
    app.emit(ConvertService(app.settings).day_bounds(day, tz=tz))
