"""
Canonical protocol definitions for stockroom.

Defines the structural contract every storable inventory entity satisfies.
Item kinds do not inherit from anything: an object that exposes the members
below is an InventoryItem, and InventoryRepository accepts it.

Manifesto:
    Protocols define contracts without inheritance. They enable:

    - **Decoupling:** The repository depends on shape, not on item kinds
    - **Substitutability:** Any kind works wherever the capability is required
    - **Testability:** A throwaway dataclass in a test is a valid item

Architecture:
    ::

        InventoryItem Protocol:
        ┌────────────────────────────────────────────────────────┐
        │ id                  → unique, immutable key            │
        │ name                → display string                   │
        │ quantity            → non-negative stock level         │
        │ with_quantity(q)    → copy carrying a new quantity     │
        └────────────────────────────────────────────────────────┘

        Implementations (stockroom.core.items):
        ┌────────────────────────────────────────────────────────┐
        │ ElectronicItem      brand, warranty_months             │
        │ GroceryItem         expiry_date                        │
        │ SupplyItem          date_added                         │
        └────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Mutate quantity on an item you got back from a repository
    ✅ DO: Go through InventoryRepository.update_quantity()

    ❌ DON'T: Add implementation logic to protocol classes
    ✅ DO: Keep protocols pure contracts - kinds live in items.py

Tags:
    protocol, inventory, capability, stockroom, contracts
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol, TypeVar, runtime_checkable


ItemT = TypeVar("ItemT", bound="InventoryItem")


@runtime_checkable
class InventoryItem(Protocol):
    """
    Minimal capability of a storable inventory entity.

    Items are immutable values; ``with_quantity`` is how the repository
    produces the updated value it stores after a validated quantity change.
    Callers never need to call it themselves.

    Examples:
        >>> from stockroom.core.items import ElectronicItem
        >>> laptop = ElectronicItem(1, "Laptop", 10, "Dell", 24)
        >>> isinstance(laptop, InventoryItem)
        True
        >>> laptop.with_quantity(15).quantity
        15
    """

    @property
    def id(self) -> Hashable:
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def quantity(self) -> int:
        ...

    def with_quantity(self: ItemT, quantity: int) -> ItemT:
        """Return a copy of this item carrying ``quantity``."""
        ...


__all__ = [
    "InventoryItem",
    "ItemT",
]
