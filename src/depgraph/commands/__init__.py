"""Subcommand modules for depgraph.

Provides register_commands() which uses deferred imports to keep
``depgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from depgraph.commands.query import query

    cli.add_command(query)

    # --- Standalone commands ---
    from depgraph.commands.export import export

    cli.add_command(export)
