"""BaseService — shared foundation for depgraph services.

Every service receives a :class:`DependencyGraph` at construction time.
Services only read the graph; edits go through the graph's own methods.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depgraph.domain.graph import DependencyGraph


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def dependents(self, node: str) -> ServiceResult:
                items = self._ordered(self._graph.get_dependents(node))
                ...
    """

    def __init__(self, graph: DependencyGraph, *, sort: bool = False) -> None:
        self._graph = graph
        self._sort = sort

    def _ordered(self, nodes: Iterable[str]) -> list[str]:
        """Return *nodes* sorted when the service was built with ``sort=True``."""
        return sorted(nodes) if self._sort else list(nodes)

    def _missing_node_warning(self, node: str) -> list[str]:
        if node in self._graph:
            return []
        return [f"Node '{node}' not found in graph"]
