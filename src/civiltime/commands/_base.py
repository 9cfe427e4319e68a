"""Click base classes with an ``--examples`` flag.

Commands built with ``examples="..."`` gain an eager ``--examples`` option
that prints the examples and exits. ``--help`` stays short; examples are
one flag away.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", "") or "")
    ctx.exit(0)


EXAMPLES_OPTION = click.Option(
    ["--examples"],
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_examples,
    help="Show usage examples.",
)


def _with_examples(params: list[click.Parameter], examples: str | None) -> list[click.Parameter]:
    return [*params, EXAMPLES_OPTION] if examples else params


class CivilCommand(click.Command):
    """Command carrying optional usage examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        return _with_examples(super().get_params(ctx), self.examples)


class CivilGroup(click.Group):
    """Group carrying usage examples; subcommands default to CivilCommand."""

    command_class = CivilCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        return _with_examples(super().get_params(ctx), self.examples)
