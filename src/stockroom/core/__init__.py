"""Stockroom Core -- typed inventory repositories with isolated stock adjustments.

Manifesto:
    Inventory code fails in two boring ways: two records fight over one id,
    or stock quietly goes negative. ``stockroom.core`` makes both impossible
    to miss. The repository refuses the change and says why, and the manager
    keeps one bad line from aborting a whole restock run.

    - **Invariants in one place:** only the repository changes item state
    - **Errors as values:** repository calls return ``Ok`` / ``Err``
    - **Kinds over classes:** callers branch on ``ErrorKind``
    - **Isolation is explicit:** only the manager absorbs failures

Module Map (recommended reading order)
--------------------------------------

**Type System & Errors (start here)**
  errors            ErrorKind taxonomy and StockroomError hierarchy
  result            Result[T] envelope (Ok / Err)
  protocols         InventoryItem capability protocol

**Inventory**
  items             ElectronicItem, GroceryItem, SupplyItem
  repository        InventoryRepository[T] keyed store
  manager           StockManager with per-item failure isolation

**Cross-Cutting Concerns**
  logging           Structured logging (structlog)
  settings          StockroomSettings (pydantic-settings)

Tags:
    stockroom, inventory, repository, result-pattern
"""

from stockroom.core.errors import (
    ConfigError,
    DuplicateKeyError,
    ErrorContext,
    ErrorKind,
    InvalidQuantityError,
    NotFoundError,
    StockroomError,
    categorize_error,
)
from stockroom.core.items import ElectronicItem, GroceryItem, SupplyItem
from stockroom.core.manager import StockAction, StockManager, StockOutcome
from stockroom.core.protocols import InventoryItem
from stockroom.core.repository import InventoryRepository
from stockroom.core.result import Err, Ok, Result

__all__ = [
    # errors
    "ConfigError",
    "DuplicateKeyError",
    "ErrorContext",
    "ErrorKind",
    "InvalidQuantityError",
    "NotFoundError",
    "StockroomError",
    "categorize_error",
    # result
    "Err",
    "Ok",
    "Result",
    # inventory
    "InventoryItem",
    "ElectronicItem",
    "GroceryItem",
    "SupplyItem",
    "InventoryRepository",
    "StockAction",
    "StockManager",
    "StockOutcome",
]
