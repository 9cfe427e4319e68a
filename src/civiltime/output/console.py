"""Rich Console factory and theme for civiltime output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CIVIL_THEME = Theme(
    {
        "ct.ok": "bold green",
        "ct.error": "bold red",
        "ct.warning": "bold yellow",
        "ct.op": "bold cyan",
        "ct.key": "dim",
        "ct.instant": "bold blue",
        "ct.date": "bold",
        "ct.zone": "magenta",
        "ct.total": "bold yellow",
        "ct.active": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=CIVIL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
