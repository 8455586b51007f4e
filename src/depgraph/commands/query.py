"""Command group: one-hop dependency queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from depgraph.commands._base import DepGroup, node_argument

if TYPE_CHECKING:
    from depgraph.commands._context import AppContext

_QUERY_EXAMPLES = """\
  depgraph -e cells.txt query dependents A1
  depgraph -e cells.txt query dependees C3
  depgraph -e cells.txt query count C3
  depgraph -e cells.txt query stats
  depgraph -e cells.txt --json query edges"""


@click.group(cls=DepGroup, examples=_QUERY_EXAMPLES)
@click.pass_obj
def query(app: AppContext) -> None:
    """Ask which nodes depend on which."""


@query.command(
    examples="""\
  depgraph -e cells.txt query dependents A1
  depgraph -e cells.txt -q query dependents A1"""
)
@node_argument
@click.pass_obj
def dependents(app: AppContext, node: str) -> None:
    """List the nodes that depend on NODE (recompute these when it changes)."""
    app.emit(app.service.dependents(node))


@query.command(
    examples="""\
  depgraph -e cells.txt query dependees C3
  depgraph -e cells.txt --json query dependees C3"""
)
@node_argument
@click.pass_obj
def dependees(app: AppContext, node: str) -> None:
    """List the nodes NODE depends on."""
    app.emit(app.service.dependees(node))


@query.command(
    examples="""\
  depgraph -e cells.txt query count C3"""
)
@node_argument
@click.pass_obj
def count(app: AppContext, node: str) -> None:
    """Count the nodes NODE depends on."""
    app.emit(app.service.dependee_count(node))


@query.command(
    examples="""\
  depgraph -e cells.txt query stats
  depgraph -e cells.txt --json query stats"""
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Summarize edge and node counts, sources, sinks."""
    app.emit(app.service.stats())


@query.command(
    examples="""\
  depgraph -e cells.txt query edges
  depgraph -e cells.txt -q query edges"""
)
@click.pass_obj
def edges(app: AppContext) -> None:
    """List every dependency pair."""
    app.emit(app.service.edges())
