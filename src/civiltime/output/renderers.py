"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from civiltime.domain.display import EMPTY, format_day_month, format_duration, format_mmdd
from civiltime.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from civiltime.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_fields)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the single most useful value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "report":
        return "\n".join(
            f"{item.get('local_date') or EMPTY} {format_duration(item.get('duration_minutes'))}"
            for item in result.data.get("items", [])
        )

    keys = _QUIET_KEYS.get(result.op)
    if keys is None:
        return f"OK: {result.op}"
    values = (result.data.get(k) for k in keys)
    return " ".join(EMPTY if v is None else str(v) for v in values)


# ── Helpers ───────────────────────────────────────────────────────────


_QUIET_KEYS: dict[str, tuple[str, ...]] = {
    "to_utc": ("instant",),
    "to_local": ("date", "time"),
    "offset": ("offset_minutes",),
    "day_bounds": ("start", "end"),
    "week": ("week_start", "week_end"),
    "month": ("month_start",),
    "window": ("begin", "end"),
}


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ct.ok")
    op = Text(f"  {result.op}", style="ct.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ct.key")
    text = EMPTY if value is None else str(value)
    if key in ("instant", "start", "end") and isinstance(value, str) and value.endswith("Z"):
        v = Text(text, style="ct.instant")
    elif key == "zone":
        v = Text(text, style="ct.zone")
    elif key == "date" or key.endswith(("_start", "_end")) or key in ("begin", "end"):
        v = Text(text, style="ct.date")
    else:
        v = Text(text)
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ct.error")
    op = Text(f"  {result.op}", style="ct.op")
    console.print(label, op, Text(f" — {msg}"), sep="")

    if err and err.detail.get("errors"):
        for item in err.detail["errors"]:
            console.print(
                Text(f"  entry {item.get('index')}", style="ct.error"),
                Text(f" {item.get('field')}: {item.get('error')}"),
                sep="",
            )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k != "errors":
                console.print(f"    {k}: {v}", markup=False)


# ── Conversion / calendar renderers ───────────────────────────────────


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render conversion and calendar results as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Report renderer ───────────────────────────────────────────────────


def _entry_row(item: dict[str, Any]) -> list[str | Text]:
    local_date = item.get("local_date")
    day = format_day_month(local_date) if local_date else EMPTY
    stop = item.get("stop_time") or EMPTY
    if item.get("active"):
        stop = Text("active", style="ct.active")
    return [
        day,
        item.get("start_time") or EMPTY,
        stop,
        format_duration(item.get("duration_minutes")),
        item.get("site") or "",
        ", ".join(item.get("events") or []),
    ]


def _total_row(label: str, begin: str, end: str, minutes: int) -> list[str | Text]:
    span = f"{format_mmdd(begin)} - {format_mmdd(end)}"
    return [
        Text(label, style="ct.total"),
        Text(span, style="ct.total"),
        "",
        Text(format_duration(minutes), style="ct.total"),
        "",
        "",
    ]


def _render_report(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render entries as a table, with a total row opening each week."""
    d = result.data
    _status_line(console, result)
    _field(console, "range", d.get("range"))
    _field(console, "begin", d.get("begin"))
    _field(console, "end", d.get("end"))
    _field(console, "zone", d.get("zone"))

    items: list[dict[str, Any]] = d.get("items", [])
    if not items:
        console.print("\n0 entries")
        return

    weeks = {w["week_start"]: w for w in d.get("weeks") or []}
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Day", style="ct.date", no_wrap=True)
    table.add_column("Start", no_wrap=True)
    table.add_column("Stop", no_wrap=True)
    table.add_column("Total", justify="right")
    table.add_column("Site")
    table.add_column("Events")

    seen: set[str] = set()
    for item in items:
        start = item.get("week_start")
        if start in weeks and start not in seen:
            week = weeks[start]
            table.add_row(*_total_row("WEEK TOTAL", start, week["week_end"], week["minutes"]))
            seen.add(start)
        table.add_row(*_entry_row(item))

    overall = d.get("grand_total")
    if overall:
        table.add_row(
            *_total_row("GRAND TOTAL", overall["begin"], overall["end"], overall["minutes"])
        )

    console.print()
    console.print(table)
    console.print(f"\n{d.get('count', len(items))} entries")
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "report": _render_report,
}
