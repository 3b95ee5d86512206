"""Concrete inventory item kinds.

Each kind is a standalone frozen dataclass satisfying
:class:`~stockroom.core.protocols.InventoryItem`. There is no shared base
class: the repository only relies on the protocol, so kinds stay free to add
whatever attributes they need.

Frozen means a caller holding an item cannot change its quantity behind the
repository's back; ``with_quantity`` returns a new value instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any


@dataclass(frozen=True, slots=True)
class ElectronicItem:
    """Electronics stock line with brand and warranty period."""

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def with_quantity(self, quantity: int) -> ElectronicItem:
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "electronic",
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "brand": self.brand,
            "warranty_months": self.warranty_months,
        }


@dataclass(frozen=True, slots=True)
class GroceryItem:
    """Perishable stock line with an expiry date."""

    id: int
    name: str
    quantity: int
    expiry_date: date

    def with_quantity(self, quantity: int) -> GroceryItem:
        return replace(self, quantity=quantity)

    def is_expired(self, on: date | None = None) -> bool:
        """True once ``on`` (default today) is past the expiry date."""
        return self.expiry_date < (on or date.today())

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "grocery",
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "expiry_date": self.expiry_date.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class SupplyItem:
    """Office supply record, dated when it entered stock."""

    id: int
    name: str
    quantity: int
    date_added: date

    def with_quantity(self, quantity: int) -> SupplyItem:
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "supply",
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "date_added": self.date_added.isoformat(),
        }


__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "SupplyItem",
]
