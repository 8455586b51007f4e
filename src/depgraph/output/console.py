"""Rich Console factory and theme for depgraph output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEPGRAPH_THEME = Theme(
    {
        "dg.ok": "bold green",
        "dg.error": "bold red",
        "dg.warning": "bold yellow",
        "dg.op": "bold cyan",
        "dg.key": "dim",
        "dg.node": "bold blue",
        "dg.count": "magenta",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    A StringIO file is never a terminal, so theme styles never become ANSI
    escape codes and rendered text is plain.

    Args:
        width: Override terminal width (default 120).
    """
    return Console(
        file=StringIO(),
        theme=DEPGRAPH_THEME,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
