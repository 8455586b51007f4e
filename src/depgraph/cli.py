"""Root CLI group for depgraph with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from depgraph import __version__
from depgraph.commands import register_commands
from depgraph.commands._context import AppContext
from depgraph.config.settings import DepGraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="depgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-e",
    "--edges",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Edge list to load (text or JSON).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    edges: Path | None,
) -> None:
    """depgraph — inspect cell dependency graphs."""
    ctx.ensure_object(dict)
    settings = DepGraphSettings.from_cli(
        config_path=config_path,
        # A flag left off is None so DEPGRAPH_* env vars and TOML still apply.
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        edges=edges,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
