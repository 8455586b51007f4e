"""Edge values and the plain-text edge-list grammar.

Pure functions, no infrastructure dependencies. The infrastructure
reader hands file contents to :func:`parse_edge_lines`.

Text format, one pair per line::

    # comment
    A1 -> B2
    A1 C3

Both lines mean "the right-hand cell depends on the left-hand cell".
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import NamedTuple

# "s -> t" with optional spacing around the arrow.
_ARROW_PATTERN = re.compile(r"^(?P<source>\S+?)\s*->\s*(?P<target>\S+)$")


class Edge(NamedTuple):
    """An ordered pair: *target* depends on *source*."""

    source: str
    target: str


class EdgeSyntaxError(ValueError):
    """A line of an edge list could not be parsed."""

    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(f"line {lineno}: expected 'source -> target' or 'source target', got {line!r}")


def parse_edge_line(line: str) -> Edge | None:
    """Parse one line. Returns None for blank lines and comments.

    Raises :class:`ValueError` when the line is neither.
    """
    text = line.split("#", 1)[0].strip()
    if not text:
        return None

    match = _ARROW_PATTERN.match(text)
    if match:
        return Edge(match.group("source"), match.group("target"))

    parts = text.split()
    if len(parts) == 2 and "->" not in parts:
        return Edge(parts[0], parts[1])
    raise ValueError(text)


def parse_edge_lines(lines: Iterable[str]) -> list[Edge]:
    """Parse an edge list, preserving line order.

    Raises :class:`EdgeSyntaxError` with a 1-based line number on the
    first malformed line.
    """
    results: list[Edge] = []
    for lineno, line in enumerate(lines, start=1):
        try:
            edge = parse_edge_line(line)
        except ValueError:
            raise EdgeSyntaxError(lineno, line.rstrip("\n")) from None
        if edge is not None:
            results.append(edge)
    return results
