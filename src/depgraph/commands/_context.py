"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Loads the edge list lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from depgraph.output.formatters import OutputSettings, format_result
from depgraph.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from depgraph.config.settings import DepGraphSettings
    from depgraph.domain.graph import DependencyGraph
    from depgraph.services.graph import GraphService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The graph is loaded on first use so ``--help``, ``--version`` and
    ``--examples`` never touch the edge list.
    """

    def __init__(self, settings: DepGraphSettings) -> None:
        self.settings = settings
        self._graph: DependencyGraph | None = None

        from depgraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def graph(self) -> DependencyGraph:
        """The graph read from the configured edge list.

        A missing or unreadable edge list ends the command with a failed
        ``load_graph`` result (stderr, exit code 1).
        """
        if self._graph is None:
            from depgraph.infrastructure.edge_file import EdgeListError, load_graph

            path = self.settings.edges_path
            if path is None:
                self.fail(
                    "load_graph",
                    ServiceError(
                        code="NO_EDGES",
                        message="No edge list: pass --edges or set [graph] edges_file.",
                    ),
                )
            try:
                self._graph = load_graph(path, self.settings.graph.format)
            except EdgeListError as exc:
                self.fail(
                    "load_graph",
                    ServiceError(code="EDGE_LIST", message=str(exc), detail={"path": str(exc.path)}),
                )
        return self._graph

    @property
    def service(self) -> GraphService:
        """A GraphService over :attr:`graph`, honoring ``[output] sort``."""
        from depgraph.services.graph import GraphService

        return GraphService(self.graph, sort=self.settings.output.sort)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def fail(self, op: str, error: ServiceError) -> NoReturn:
        """Write a failed result for *op* to stderr and exit with code 1."""
        result = ServiceResult(ok=False, op=op, error=error)
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def emit(self, result: ServiceResult) -> None:
        """Write a successful ServiceResult to stdout.

        In quiet mode warnings go to stderr so piped output stays clean.
        """
        settings = self._output_settings()
        click.echo(format_result(result, settings=settings))
        if settings.quiet and not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
