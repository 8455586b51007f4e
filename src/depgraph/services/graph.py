"""GraphService — one-hop queries and summaries over a DependencyGraph.

Unknown nodes are not errors: they produce empty payloads plus a warning,
matching the fail-soft contract of the graph itself.
"""

from __future__ import annotations

import logging

from depgraph.infrastructure.graph.engine import node_link_data
from depgraph.services.base import BaseService
from depgraph.services.result import ServiceResult

logger = logging.getLogger(__name__)


class GraphService(BaseService):
    """Handles dependency queries for the CLI."""

    def dependents(self, node: str) -> ServiceResult:
        """List the nodes that depend on *node*."""
        items = self._ordered(self._graph.get_dependents(node))
        return ServiceResult(
            ok=True,
            op="dependents",
            data={"node": node, "count": len(items), "items": items},
            warnings=self._missing_node_warning(node),
        )

    def dependees(self, node: str) -> ServiceResult:
        """List the nodes *node* depends on."""
        items = self._ordered(self._graph.get_dependees(node))
        return ServiceResult(
            ok=True,
            op="dependees",
            data={"node": node, "count": len(items), "items": items},
            warnings=self._missing_node_warning(node),
        )

    def dependee_count(self, node: str) -> ServiceResult:
        """Report the size of dependees(*node*)."""
        return ServiceResult(
            ok=True,
            op="dependee_count",
            data={"node": node, "count": self._graph.dependee_count(node)},
            warnings=self._missing_node_warning(node),
        )

    def stats(self) -> ServiceResult:
        """Summarize the graph.

        ``sources`` have dependents but no dependees; ``sinks`` have
        dependees but no dependents. Nodes with neither are ``isolated``.
        """
        g = self._graph
        nodes = g.nodes()
        sources = [n for n in nodes if g.has_dependents(n) and not g.has_dependees(n)]
        sinks = [n for n in nodes if g.has_dependees(n) and not g.has_dependents(n)]
        isolated = [n for n in nodes if not g.has_dependents(n) and not g.has_dependees(n)]
        self_edges = sum(1 for n in nodes if g.has_dependency(n, n))
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "size": g.size,
                "nodes": len(nodes),
                "self_edges": self_edges,
                "sources": self._ordered(sources),
                "sinks": self._ordered(sinks),
                "isolated": self._ordered(isolated),
            },
        )

    def edges(self) -> ServiceResult:
        """List every pair as ``{"source": s, "target": t}``."""
        pairs = list(self._graph.edges())
        if self._sort:
            pairs.sort()
        items = [{"source": e.source, "target": e.target} for e in pairs]
        return ServiceResult(ok=True, op="edges", data={"count": len(items), "items": items})

    def export(self) -> ServiceResult:
        """Return NetworkX node-link data for the whole graph."""
        data = node_link_data(self._graph)
        logger.debug("Exported %d nodes, %d edges", len(data["nodes"]), len(data["edges"]))
        return ServiceResult(ok=True, op="export", data=data)
