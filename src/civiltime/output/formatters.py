"""Output-mode dispatch for ServiceResult.

The CLI renders results for humans (Rich tables and fields), for scripts
(``--json``), or minimally (``--quiet``). This module picks the mode; the
per-operation layouts live in :mod:`civiltime.output.renderers`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from civiltime.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from civiltime.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
