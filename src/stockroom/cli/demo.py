"""
CLI: ``stockroom demo``: seeded warehouse walkthrough.

Seeds an electronics and a grocery repository, provokes each failure kind
once, then applies two valid adjustments. Seeding failures are reported here,
at the call site; adjustment failures come back from the manager as outcomes.

Every step is collected into one report. The default rendering is rich tables
and one line per step; ``--json`` prints the report as a single JSON document
on stdout and moves log lines to stderr so the output stays parseable.
"""

from __future__ import annotations

import sys
from datetime import date, timedelta
from typing import Any

import typer

from stockroom.cli.utils import console, print_items, print_report_json, print_step
from stockroom.core.errors import DuplicateKeyError, InvalidQuantityError
from stockroom.core.items import ElectronicItem, GroceryItem
from stockroom.core.logging import LOG_LEVELS, configure_logging, get_logger
from stockroom.core.manager import StockManager
from stockroom.core.repository import InventoryRepository
from stockroom.core.result import Err
from stockroom.core.settings import get_settings

logger = get_logger(__name__)

_TITLES = {"electronics": "Electronic Items", "groceries": "Grocery Items"}


def build_warehouse() -> StockManager:
    """Create a manager with empty electronics and groceries repositories."""
    manager = StockManager()
    manager.register("electronics", InventoryRepository[ElectronicItem]())
    manager.register("groceries", InventoryRepository[GroceryItem]())
    return manager


def seed_warehouse(manager: StockManager, today: date | None = None) -> None:
    """Load the sample stock. Raises DuplicateKeyError on bad seed data."""
    today = today or date.today()
    manager.seed(manager.repository("electronics"), [
        ElectronicItem(1, "Laptop", 10, "Dell", 24),
        ElectronicItem(2, "Smartphone", 20, "Samsung", 12),
    ])
    manager.seed(manager.repository("groceries"), [
        GroceryItem(100, "Rice (5kg)", 50, today + timedelta(days=365)),
        GroceryItem(101, "Milk", 30, today + timedelta(days=20)),
    ])


def snapshot(manager: StockManager) -> dict[str, list[dict[str, Any]]]:
    """Every registered repository as plain dicts, keyed by kind."""
    return {
        kind: [item.to_dict() for item in manager.repository(kind).list_all()]
        for kind in manager.kinds()
    }


def run_walkthrough(manager: StockManager) -> dict[str, Any]:
    """Seed, fail once per kind, adjust twice; return the collected report."""
    electronics = manager.repository("electronics")
    groceries = manager.repository("groceries")
    steps: list[dict[str, Any]] = []

    try:
        seed_warehouse(manager)
    except (DuplicateKeyError, InvalidQuantityError) as exc:
        steps.append({"step": "seed", **Err(exc).to_dict()})

    before = snapshot(manager)

    duplicate = electronics.add(ElectronicItem(1, "Tablet", 5, "Apple", 12))
    steps.append({"step": "duplicate_add", **duplicate.to_dict()})
    steps.append({"step": "remove_missing", **manager.remove_item_by_id(groceries, 999).to_dict()})
    negative = groceries.update_quantity(100, -5)
    steps.append({"step": "negative_update", **negative.to_dict()})

    steps.append({"step": "restock_smartphone", **manager.increase_stock(electronics, 2, 5).to_dict()})
    steps.append({"step": "sell_milk", **manager.increase_stock(groceries, 101, -10).to_dict()})

    return {"before": before, "steps": steps, "after": snapshot(manager)}


def _check_level(value: str | None) -> str | None:
    if value is None:
        return None
    if value.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return value.upper()


def demo(
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", callback=_check_level, help="Override STOCKROOM_LOG_LEVEL."
    ),
    json_logs: bool | None = typer.Option(None, "--json-logs/--console-logs", help="Log line format."),
    json_out: bool = typer.Option(False, "--json", help="Print the walkthrough report as one JSON document."),
) -> None:
    """Run the warehouse walkthrough."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_format=json_logs if json_logs is not None else settings.log_json,
        service=settings.service_name,
        stream=sys.stderr if json_out else None,
    )

    manager = build_warehouse()
    report = run_walkthrough(manager)

    if json_out:
        print_report_json(report)
    else:
        for kind, rows in report["before"].items():
            print_items(rows, title=_TITLES.get(kind, kind))
        console.print("\n[bold]Walkthrough[/bold]")
        for step in report["steps"]:
            print_step(step)
        for kind, rows in report["after"].items():
            print_items(rows, title=_TITLES.get(kind, kind))

    logger.info("demo_completed", kinds=manager.kinds())
