"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from depgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from depgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    *verbose* adds error detail to failed results.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one node or pair per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # The export payload is the document itself.
    if result.op == "export":
        return _export_json(result)

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_item_text(item) for item in items)
    if "count" in result.data:
        return str(result.data["count"])
    if "size" in result.data:
        return str(result.data["size"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_text(item: Any) -> str:
    if isinstance(item, dict) and "source" in item:
        return f"{item['source']} -> {item['target']}"
    return str(item)


def _export_json(result: ServiceResult) -> str:
    return json.dumps(result.data, indent=2)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="dg.ok") + Text(f"  {result.op}", style="dg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dg.key")
    if key == "node":
        v = Text(str(value), style="dg.node")
    elif isinstance(value, int):
        v = Text(str(value), style="dg.count")
    elif isinstance(value, list):
        v = Text(", ".join(str(item) for item in value) or "-")
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="dg.warning") + Text(warning))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dg.error")
    op = Text(f"  {result.op}", style="dg.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg, markup=False, soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False, soft_wrap=True)


# ── Query renderers ───────────────────────────────────────────────────


def _render_node_list(result: ServiceResult, console: Console) -> None:
    """Render dependents/dependees as a one-column table."""
    _status_line(console, result)
    _field(console, "node", result.data.get("node", ""))
    _render_warnings(console, result)

    items = result.data.get("items", [])
    if items:
        title = "Dependents" if result.op == "dependents" else "Dependees"
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column(title, style="dg.node", no_wrap=True)
        for item in items:
            table.add_row(str(item))
        console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} nodes")


def _render_edge_table(result: ServiceResult, console: Console) -> None:
    """Render the full pair list as a two-column table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Source", style="dg.node", no_wrap=True)
    table.add_column("Target", style="dg.node", no_wrap=True)
    for item in items:
        table.add_row(str(item["source"]), str(item["target"]))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} edges")


def _render_export(result: ServiceResult, console: Console) -> None:
    console.print(_export_json(result), markup=False, emoji=False, soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line plus one field per data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "dependents": _render_node_list,
    "dependees": _render_node_list,
    "edges": _render_edge_table,
    "export": _render_export,
}
