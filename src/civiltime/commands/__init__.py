"""Subcommand modules for civiltime.

Provides register_commands() which uses deferred imports to keep
``civiltime --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group.

    2 groups (have subcommands) + 1 standalone command.
    """
    # --- Groups ---
    from civiltime.commands.calendar import calendar
    from civiltime.commands.convert import convert

    cli.add_command(convert)
    cli.add_command(calendar)

    # --- Standalone commands ---
    from civiltime.commands.report import report

    cli.add_command(report)
