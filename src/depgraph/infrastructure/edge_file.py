"""Edge-list files — read text or JSON pairs from disk.

Read-only: the graph is never written back. JSON files hold either
``{"edges": [["s", "t"], ...]}`` or a bare list of pairs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from depgraph.domain.edges import Edge, EdgeSyntaxError, parse_edge_lines
from depgraph.domain.graph import DependencyGraph

logger = logging.getLogger(__name__)

EdgeFormat = Literal["auto", "text", "json"]


class EdgeListError(ValueError):
    """An edge-list file is missing or malformed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def resolve_format(path: Path, fmt: EdgeFormat = "auto") -> Literal["text", "json"]:
    """Pick the concrete format: ``.json`` files are JSON, everything else text."""
    if fmt != "auto":
        return fmt
    return "json" if path.suffix.lower() == ".json" else "text"


def _pairs_from_json(path: Path, data: Any) -> list[Edge]:
    if isinstance(data, dict):
        data = data.get("edges")
    if not isinstance(data, list):
        raise EdgeListError(path, "expected a list of [source, target] pairs")

    results: list[Edge] = []
    for index, item in enumerate(data):
        if (
            not isinstance(item, (list, tuple))
            or len(item) != 2
            or not all(isinstance(node, str) and node for node in item)
        ):
            raise EdgeListError(path, f"edge #{index} is not a [source, target] string pair")
        results.append(Edge(item[0], item[1]))
    return results


def read_edge_file(path: Path, fmt: EdgeFormat = "auto") -> list[Edge]:
    """Read every pair from *path*.

    Raises:
        EdgeListError: The file is unreadable or malformed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EdgeListError(path, exc.strerror or str(exc)) from exc

    if resolve_format(path, fmt) == "json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise EdgeListError(path, f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc
        edges = _pairs_from_json(path, data)
    else:
        try:
            edges = parse_edge_lines(raw.splitlines())
        except EdgeSyntaxError as exc:
            raise EdgeListError(path, str(exc)) from exc

    logger.debug("Read %d edges from %s", len(edges), path)
    return edges


def load_graph(path: Path, fmt: EdgeFormat = "auto") -> DependencyGraph:
    """Read *path* into a fresh :class:`DependencyGraph`."""
    return DependencyGraph.from_edges(read_edge_file(path, fmt))
