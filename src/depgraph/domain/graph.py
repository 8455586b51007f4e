"""DependencyGraph — mirrored dependents/dependees indexes over string nodes.

An edge ``(s, t)`` means *t depends on s*: s must be evaluated before t.
Every node that has appeared in an edge owns an adjacency record holding
both views, and the two views are kept as exact mirror images:

    t in dependents(s)  <=>  s in dependees(t)

The graph never traverses transitively and never checks for cycles.
Callers (e.g. a spreadsheet recalculation engine) own ordering and cycle
detection. ``None`` stands for an absent reference: queries degrade to
empty results and mutators become no-ops instead of raising.

Not thread-safe. A replace operation passes through intermediate states,
so concurrent readers need external locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from depgraph.domain.edges import Edge

logger = logging.getLogger(__name__)


@dataclass
class _Adjacency:
    """Both views for one node. Dict keys act as insertion-ordered sets."""

    dependents: dict[str, None] = field(default_factory=dict)
    dependees: dict[str, None] = field(default_factory=dict)


class DependencyGraph:
    """A set of ordered pairs ``(s, t)`` where t depends on s.

    Example::

        dg = DependencyGraph()
        dg.add_dependency("a", "b")
        dg.add_dependency("a", "c")
        dg.get_dependents("a")  # ("b", "c")
        dg["b"]                 # 1, the size of dependees("b")
    """

    def __init__(self) -> None:
        self._nodes: dict[str, _Adjacency] = {}
        self._size = 0

    @classmethod
    def from_edges(cls, pairs: Iterable[tuple[str | None, str | None]]) -> DependencyGraph:
        """Build a graph by adding every ``(s, t)`` pair in order."""
        graph = cls()
        for s, t in pairs:
            graph.add_dependency(s, t)
        return graph

    # ------------------------------------------------------------------
    # Size and counts
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """The number of ordered pairs in the graph."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def dependee_count(self, s: str | None) -> int:
        """Size of dependees(s); 0 for ``None`` or an unknown node."""
        if s is None:
            return 0
        record = self._nodes.get(s)
        if record is None:
            return 0
        return len(record.dependees)

    def __getitem__(self, s: str | None) -> int:
        return self.dependee_count(s)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        return f"DependencyGraph(nodes={len(self._nodes)}, size={self._size})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_dependents(self, s: str | None) -> bool:
        """Report whether dependents(s) is non-empty."""
        if s is None:
            return False
        record = self._nodes.get(s)
        return record is not None and len(record.dependents) > 0

    def has_dependees(self, s: str | None) -> bool:
        """Report whether dependees(s) is non-empty."""
        if s is None:
            return False
        record = self._nodes.get(s)
        return record is not None and len(record.dependees) > 0

    def has_dependency(self, s: str | None, t: str | None) -> bool:
        """Report whether the pair ``(s, t)`` is in the graph."""
        if s is None or t is None:
            return False
        record = self._nodes.get(s)
        return record is not None and t in record.dependents

    def get_dependents(self, s: str | None) -> tuple[str, ...]:
        """Snapshot of dependents(s), in insertion order.

        Returns an empty tuple for ``None`` or an unknown node. Later
        mutations never show up in a returned snapshot.
        """
        if s is None:
            return ()
        record = self._nodes.get(s)
        if record is None:
            return ()
        return tuple(record.dependents)

    def get_dependees(self, s: str | None) -> tuple[str, ...]:
        """Snapshot of dependees(s), in insertion order."""
        if s is None:
            return ()
        record = self._nodes.get(s)
        if record is None:
            return ()
        return tuple(record.dependees)

    def nodes(self) -> tuple[str, ...]:
        """Every materialized node, including ones whose edges were all removed."""
        return tuple(self._nodes)

    def edges(self) -> Iterator[Edge]:
        """Iterate over a snapshot of all pairs, grouped by source."""
        snapshot = [
            Edge(source, target)
            for source, record in self._nodes.items()
            for target in record.dependents
        ]
        return iter(snapshot)

    # ------------------------------------------------------------------
    # Mutation primitives
    # ------------------------------------------------------------------

    def _materialize(self, node: str) -> _Adjacency:
        record = self._nodes.get(node)
        if record is None:
            record = self._nodes[node] = _Adjacency()
        return record

    def add_dependency(self, s: str | None, t: str | None) -> None:
        """Add the pair ``(s, t)`` if it is not already present.

        Does nothing if either argument is ``None``. Both nodes are
        materialized even when the pair already exists.
        """
        if s is None or t is None:
            logger.debug("Ignoring add_dependency with missing node: (%r, %r)", s, t)
            return

        source = self._materialize(s)
        target = self._materialize(t)
        if t in source.dependents:
            return

        source.dependents[t] = None
        target.dependees[s] = None
        self._size += 1

    def remove_dependency(self, s: str | None, t: str | None) -> None:
        """Remove the pair ``(s, t)`` if it exists.

        Empty adjacency records are left in place.
        """
        if s is None or t is None:
            logger.debug("Ignoring remove_dependency with missing node: (%r, %r)", s, t)
            return

        source = self._nodes.get(s)
        target = self._nodes.get(t)
        if source is None or target is None or t not in source.dependents:
            return

        del source.dependents[t]
        del target.dependees[s]
        self._size -= 1

    # ------------------------------------------------------------------
    # Bulk replacement
    # ------------------------------------------------------------------

    def replace_dependents(self, s: str | None, new_dependents: Iterable[str | None] | None) -> None:
        """Replace every pair ``(s, r)`` with ``(s, t)`` for t in *new_dependents*.

        Does nothing when *s* is ``None`` or *new_dependents* is ``None`` or
        empty. dependees(s) is left untouched.
        """
        if s is None or new_dependents is None:
            return
        replacements = list(new_dependents)
        if not replacements:
            return

        old = self.get_dependents(s)
        for r in old:
            self.remove_dependency(s, r)
        for t in replacements:
            self.add_dependency(s, t)
        logger.debug(
            "Replaced dependents of %r: %d removed, %d now present",
            s,
            len(old),
            len(self.get_dependents(s)),
        )

    def replace_dependees(self, s: str | None, new_dependees: Iterable[str | None] | None) -> None:
        """Replace every pair ``(r, s)`` with ``(t, s)`` for t in *new_dependees*.

        Same no-op rules as :meth:`replace_dependents`, mirrored.
        """
        if s is None or new_dependees is None:
            return
        replacements = list(new_dependees)
        if not replacements:
            return

        old = self.get_dependees(s)
        for r in old:
            self.remove_dependency(r, s)
        for t in replacements:
            self.add_dependency(t, s)
        logger.debug(
            "Replaced dependees of %r: %d removed, %d now present",
            s,
            len(old),
            len(self.get_dependees(s)),
        )
