"""Generic in-memory repository for one inventory item kind.

Provides :class:`InventoryRepository`, a keyed store generic over any type
satisfying :class:`~stockroom.core.protocols.InventoryItem`. It is the only
place item state changes, and it enforces three invariants after every call:

- ids are unique within the repository
- every stored quantity is an int >= 0
- a lookup returns the current stored item or reports absence

Architecture::

    ┌────────────────────────────────────────────────────────────────────┐
    │                   InventoryRepository[T]                           │
    │                                                                    │
    │   _items: dict[id, T]     ← insertion ordered                      │
    │   _lock:  RLock           ← one operation in flight at a time      │
    │                                                                    │
    │   add(item)                      → Ok(item)    | DUPLICATE_KEY     │
    │                                                  INVALID_QUANTITY  │
    │   get_by_id(id)                  → Ok(item)    | NOT_FOUND         │
    │   remove(id)                     → Ok(item)    | NOT_FOUND         │
    │   list_all()                     → list[T] (snapshot)              │
    │   update_quantity(id, quantity)  → Ok(item)    | INVALID_QUANTITY  │
    │                                                  NOT_FOUND         │
    └────────────────────────────────────────────────────────────────────┘

Failures are returned as ``Err`` values, never raised and never logged here;
deciding what a failure means is the caller's job.

Usage:
    >>> from stockroom.core.items import ElectronicItem
    >>> repo = InventoryRepository[ElectronicItem](name="electronics")
    >>> repo.add(ElectronicItem(1, "Laptop", 10, "Dell", 24)).is_ok()
    True
    >>> repo.add(ElectronicItem(1, "Tablet", 5, "Apple", 12)).error.kind.value
    'DUPLICATE_KEY'

Tags:
    repository, inventory, generics, invariants
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from typing import Generic

from stockroom.core.errors import (
    DuplicateKeyError,
    InvalidQuantityError,
    NotFoundError,
    StockroomError,
)
from stockroom.core.protocols import ItemT
from stockroom.core.result import Err, Ok, Result


def _valid_quantity(quantity: object) -> bool:
    # bool is an int subclass but never a stock level
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 0


class InventoryRepository(Generic[ItemT]):
    """Keyed store for a single item kind.

    The store is kind-agnostic: it reads ``id`` and ``quantity`` and asks the
    item for an updated copy via ``with_quantity``; nothing else about the
    item matters to it.

    Parameters:
        name: Label used in error context (``electronics``, ``groceries``...).
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._items: dict[Hashable, ItemT] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        with self._lock:
            return item_id in self._items

    def __repr__(self) -> str:
        return f"InventoryRepository(name={self.name!r}, items={len(self)})"

    # -- Writes ------------------------------------------------------------

    def add(self, item: ItemT) -> Result[ItemT]:
        """Insert ``item`` if its id is free and its quantity is valid.

        The store is left unchanged on failure; an existing item with the
        same id is never overwritten.
        """
        with self._lock:
            if not _valid_quantity(item.quantity):
                return Err(self._error(
                    InvalidQuantityError(item.quantity, item_id=item.id), "add"
                ))
            if item.id in self._items:
                return Err(self._error(DuplicateKeyError(item.id), "add"))
            self._items[item.id] = item
            return Ok(item)

    def remove(self, item_id: Hashable) -> Result[ItemT]:
        """Delete the item stored under ``item_id`` and return it."""
        with self._lock:
            if item_id not in self._items:
                return Err(self._error(
                    NotFoundError(item_id, f"No item found with id {item_id!r} to remove."),
                    "remove",
                ))
            return Ok(self._items.pop(item_id))

    def update_quantity(self, item_id: Hashable, new_quantity: int) -> Result[ItemT]:
        """Overwrite the stored quantity of ``item_id``.

        A negative or non-integer quantity is reported as INVALID_QUANTITY
        before the id is resolved, so a call with both problems reports only
        that one.
        """
        with self._lock:
            if not _valid_quantity(new_quantity):
                return Err(self._error(
                    InvalidQuantityError(new_quantity, item_id=item_id),
                    "update_quantity",
                ))
            return self._lookup(item_id, "update_quantity").map(
                lambda item: self._store(item.with_quantity(new_quantity))
            )

    # -- Reads -------------------------------------------------------------

    def get_by_id(self, item_id: Hashable) -> Result[ItemT]:
        """Return the item stored under ``item_id``."""
        with self._lock:
            return self._lookup(item_id, "get_by_id")

    def list_all(self) -> list[ItemT]:
        """Snapshot of every stored item, in insertion order.

        The list is a fresh copy; changing it never touches the store.
        """
        with self._lock:
            return list(self._items.values())

    def ids(self) -> list[Hashable]:
        """Snapshot of stored ids, in insertion order."""
        with self._lock:
            return list(self._items)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the repository lock across several calls.

        The lock is reentrant, so the repository's own methods can be called
        inside the block; other threads wait until it exits.
        """
        with self._lock:
            yield

    # -- Internals ---------------------------------------------------------

    def _lookup(self, item_id: Hashable, operation: str) -> Result[ItemT]:
        if item_id not in self._items:
            return Err(self._error(NotFoundError(item_id), operation))
        return Ok(self._items[item_id])

    def _store(self, item: ItemT) -> ItemT:
        # Replaces in place: dict keeps the original insertion position.
        self._items[item.id] = item
        return item

    def _error(self, error: StockroomError, operation: str) -> StockroomError:
        return error.with_context(repository=self.name, operation=operation)


__all__ = [
    "InventoryRepository",
]
