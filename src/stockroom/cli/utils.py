"""
CLI utility helpers: output formatting for inventories and walkthrough steps.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_items(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a repository snapshot (``item.to_dict()`` rows) as a Rich table."""
    if not rows:
        console.print(f"[dim]{title}: no items.[/dim]")
        return

    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(str(value) for value in row.values()))
    console.print(table)


def print_step(step: dict[str, Any]) -> None:
    """One line per serialized Result or StockOutcome; failures go to stderr."""
    label = escape(f"[{step['step']}]")
    error = step.get("error")
    if error is None:
        detail = step.get("value", step)
        item_id = detail.get("item_id", detail.get("id"))
        console.print(f"[green]{label}[/green] id={item_id} quantity={detail.get('quantity')}")
        return
    err_console.print(f"[bold red]{label}[/bold red] ({error['kind']}): {escape(error['message'])}")


def print_report_json(report: dict[str, Any]) -> None:
    """Emit the whole report as a single JSON document."""
    console.print_json(json.dumps(report, default=str))
