"""Shared pytest fixtures for depgraph tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from depgraph.domain.graph import DependencyGraph

# The worked example: B1 and C1 read A1, D1 reads B1 and itself.
EXAMPLE_EDGES = [("A1", "B1"), ("A1", "C1"), ("B1", "D1"), ("D1", "D1")]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def example_graph() -> DependencyGraph:
    """In-memory graph holding :data:`EXAMPLE_EDGES`."""
    return DependencyGraph.from_edges(EXAMPLE_EDGES)


@pytest.fixture
def edges_file(tmp_path: Path) -> Path:
    """Text edge list holding :data:`EXAMPLE_EDGES`."""
    path = tmp_path / "cells.txt"
    lines = ["# example sheet"] + [f"{s} -> {t}" for s, t in EXAMPLE_EDGES]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DEPGRAPH_* variables from the developer's shell out of tests."""
    for var in (
        "DEPGRAPH_CONFIG",
        "DEPGRAPH_EDGES",
        "DEPGRAPH_VERBOSE",
        "DEPGRAPH_JSON_OUTPUT",
        "DEPGRAPH_QUIET",
        "DEPGRAPH_LOG_JSON",
        "DEPGRAPH_GRAPH__EDGES_FILE",
        "DEPGRAPH_OUTPUT__SORT",
    ):
        monkeypatch.delenv(var, raising=False)
