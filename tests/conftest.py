"""
Shared pytest fixtures and configuration for stockroom tests.

This module provides:
- Auto-marking of tests by location
- Settings / logging-context cleanup for test isolation
- Empty and seeded repositories plus a wired StockManager

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_restock(manager, electronics):
        ...
"""

import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Generator

import pytest

# Ensure stockroom package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stockroom.core.items import ElectronicItem, GroceryItem
from stockroom.core.logging import clear_context
from stockroom.core.manager import StockManager
from stockroom.core.repository import InventoryRepository
from stockroom.core.settings import reset_settings


TODAY = date(2026, 1, 15)


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast, in-memory tests")
    config.addinivalue_line("markers", "cli: tests that drive the typer app")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "cli"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_fixture() -> Generator[None, None, None]:
    """Drop cached settings and bound log context around each test."""
    reset_settings()
    clear_context()
    yield
    reset_settings()
    clear_context()


# =============================================================================
# Inventory Fixtures
# =============================================================================


@pytest.fixture
def laptop() -> ElectronicItem:
    return ElectronicItem(1, "Laptop", 10, "Dell", 24)


@pytest.fixture
def empty_repo() -> InventoryRepository[ElectronicItem]:
    return InventoryRepository[ElectronicItem](name="electronics")


@pytest.fixture
def manager() -> StockManager:
    """Manager with empty electronics and groceries repositories."""
    manager = StockManager()
    manager.register("electronics", InventoryRepository[ElectronicItem]())
    manager.register("groceries", InventoryRepository[GroceryItem]())
    return manager


@pytest.fixture
def electronics(manager: StockManager) -> InventoryRepository[ElectronicItem]:
    """Seeded electronics: Laptop (id 1, qty 10), Smartphone (id 2, qty 20)."""
    repo = manager.repository("electronics")
    manager.seed(repo, [
        ElectronicItem(1, "Laptop", 10, "Dell", 24),
        ElectronicItem(2, "Smartphone", 20, "Samsung", 12),
    ])
    return repo


@pytest.fixture
def groceries(manager: StockManager) -> InventoryRepository[GroceryItem]:
    """Seeded groceries: Rice (id 100, qty 50), Milk (id 101, qty 30)."""
    repo = manager.repository("groceries")
    manager.seed(repo, [
        GroceryItem(100, "Rice (5kg)", 50, TODAY + timedelta(days=365)),
        GroceryItem(101, "Milk", 30, TODAY + timedelta(days=20)),
    ])
    return repo
