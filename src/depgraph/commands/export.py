"""Standalone command: export the graph as NetworkX node-link JSON."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from depgraph.commands._base import DepCommand

if TYPE_CHECKING:
    from depgraph.commands._context import AppContext


@click.command(
    cls=DepCommand,
    examples="""\
  depgraph -e cells.txt export
  depgraph -e cells.txt export > graph.json""",
)
@click.pass_obj
def export(app: AppContext) -> None:
    """Print the graph as node-link JSON for NetworkX and other tools."""
    app.emit(app.service.export())
