"""NetworkX adapter — expose a DependencyGraph as a ``nx.DiGraph``.

The dependency graph itself only answers one-hop questions. Hosts that
need ordering, reachability or cycle checks build a DiGraph here and run
NetworkX algorithms on it. Edges point from dependee to dependent
(``s -> t`` for "t depends on s").
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from depgraph.domain.graph import DependencyGraph

_Graph: TypeAlias = nx.DiGraph


def to_networkx(graph: DependencyGraph) -> _Graph:
    """Build a DiGraph from *graph*.

    Adds all materialized nodes first (so nodes left without edges stay
    visible to algorithms), then every dependency pair.
    """
    g: _Graph = nx.DiGraph()
    g.add_nodes_from(graph.nodes())
    g.add_edges_from(graph.edges())
    return g


def node_link_data(graph: DependencyGraph) -> dict[str, Any]:
    """Return NetworkX node-link JSON data for *graph*."""
    return nx.node_link_data(to_networkx(graph), edges="edges")
