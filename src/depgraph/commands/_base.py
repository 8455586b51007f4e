"""Click base classes and shared parameters for depgraph commands.

``DepCommand`` and ``DepGroup`` accept an ``examples`` string. Passing
``--examples`` prints it and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_callback(examples: str) -> Any:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return show


def _with_examples(cmd: click.Command, examples: str | None) -> None:
    if not examples:
        return
    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_examples_callback(examples),
            help="Show usage examples.",
        )
    )


class DepCommand(click.Command):
    """Command that understands ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _with_examples(self, examples)


class DepGroup(click.Group):
    """Group whose subcommands default to :class:`DepCommand`."""

    command_class = DepCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _with_examples(self, examples)


# A node id as it appears in the edge list, e.g. a cell name like ``A1``.
node_argument = click.argument("node")
