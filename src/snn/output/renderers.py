"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from snn.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from snn.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS[result.op](result, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``parse`` prints the name alone; a failed ``check`` prints the invalid
    names one per line.
    """
    if result.ok:
        if result.op == "parse":
            return str(result.data.get("name", ""))
        return f"OK: {result.op}"
    if result.error and result.error.code == "INVALID_NAMES":
        return "\n".join(str(item["name"]) for item in result.error.detail.get("items", []))
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "snn.ok"), (f"  {result.op}", "snn.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "snn.key"), (str(value), style)))


def _render_parse(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "name", data.get("name", ""), "snn.name")
    _field(console, "base", data.get("base", ""))
    if data.get("suffix"):
        _field(console, "suffix", data["suffix"], "snn.suffix")
    _field(console, "length", data.get("length", 0))


def _items_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name")
    table.add_column("Valid")
    table.add_column("Error", style="dim")
    for item in items:
        ok = bool(item.get("valid"))
        table.add_row(
            Text(repr(item.get("name", "")), style="snn.name"),
            Text("yes" if ok else "no", style="snn.valid" if ok else "snn.invalid"),
            item.get("error") or "",
        )
    return table


def _render_check(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "count", data.get("count", 0))
    items = data.get("items") or []
    if items:
        console.print(_items_table(items))


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    code = result.error.code if result.error else ""
    console.print(
        Text.assemble(("ERROR", "snn.error"), (f"  {result.op}", "snn.op"), f" — {msg}")
    )
    if code:
        _field(console, "code", code)
    if result.error is None:
        return
    name = result.error.detail.get("name")
    if name is not None:
        _field(console, "name", repr(name), "snn.name")
    items = result.error.detail.get("items")
    if items:
        console.print(_items_table(items))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "parse": _render_parse,
    "check": _render_check,
}
