"""Stock manager: batch-safe adjustments over typed repositories.

``StockManager`` is the one layer allowed to absorb repository failures.
Adjustments and removals turn NOT_FOUND / INVALID_QUANTITY into a
:class:`StockOutcome` instead of propagating, so a caller can run many of
them in a loop and every item gets processed regardless of earlier failures.

Seeding is the exception: a DUPLICATE_KEY while seeding means the seed data
itself is wrong, so ``seed`` raises it to the caller rather than reporting.

Architecture::

    caller ──► StockManager ──► InventoryRepository ──► dict
                 │
                 ├── increase_stock / decrease_stock ─► StockOutcome
                 ├── remove_item_by_id ───────────────► StockOutcome
                 ├── adjust_many ─────────────────────► list[StockOutcome]
                 └── seed ────────────────────────────► raises DuplicateKeyError

Tags:
    inventory, error-isolation, batch-processing, stockroom
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from stockroom.core.errors import (
    ConfigError,
    ErrorKind,
    InvalidQuantityError,
    StockroomError,
)
from stockroom.core.logging import LogContext, get_logger
from stockroom.core.protocols import ItemT
from stockroom.core.repository import InventoryRepository
from stockroom.core.result import Err, Ok, Result

logger = get_logger(__name__)

# Kinds the manager reports instead of propagating.
_ISOLATED_KINDS = frozenset({ErrorKind.NOT_FOUND, ErrorKind.INVALID_QUANTITY})


class StockAction(str, Enum):
    """What a StockOutcome records."""

    ADJUST = "adjust"
    REMOVE = "remove"


_FAILURE_EVENTS = {
    StockAction.ADJUST: "stock_adjustment_failed",
    StockAction.REMOVE: "item_remove_failed",
}


@dataclass(frozen=True, slots=True)
class StockOutcome:
    """Reported result of one manager operation.

    ``quantity`` is the resulting stock level for a successful adjustment,
    the last stored level for a removal, and ``None`` when it is unknown.
    """

    action: StockAction
    item_id: Hashable
    succeeded: bool
    quantity: int | None = None
    error: StockroomError | None = None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "action": self.action.value,
            "item_id": self.item_id,
            "succeeded": self.succeeded,
        }
        if self.quantity is not None:
            result["quantity"] = self.quantity
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


class StockManager:
    """Holds named repositories and adjusts stock with failure isolation.

    The manager never caches item state; everything it reports comes from
    the repository at call time.

    Example:
        manager = StockManager()
        electronics = manager.register("electronics", InventoryRepository())
        manager.seed(electronics, [ElectronicItem(1, "Laptop", 10, "Dell", 24)])
        outcome = manager.increase_stock(electronics, 1, 5)
        assert outcome.succeeded and outcome.quantity == 15
    """

    def __init__(
        self,
        repositories: dict[str, InventoryRepository[Any]] | None = None,
    ) -> None:
        self._repositories: dict[str, InventoryRepository[Any]] = {}
        for kind, repo in (repositories or {}).items():
            self.register(kind, repo)

    # -- Repository registry -----------------------------------------------

    def register(self, kind: str, repo: InventoryRepository[ItemT]) -> InventoryRepository[ItemT]:
        """Attach ``repo`` under ``kind`` and return it."""
        if kind in self._repositories:
            raise ConfigError(f"Repository already registered: {kind}")
        if repo.name is None:
            repo.name = kind
        self._repositories[kind] = repo
        return repo

    def repository(self, kind: str) -> InventoryRepository[Any]:
        """Look up a registered repository; unknown kinds are a wiring bug."""
        try:
            return self._repositories[kind]
        except KeyError:
            raise ConfigError(
                f"No repository registered for kind {kind!r}"
            ).with_context(kinds=sorted(self._repositories)) from None

    def kinds(self) -> list[str]:
        return list(self._repositories)

    # -- Seeding -----------------------------------------------------------

    def seed(self, repo: InventoryRepository[ItemT], items: Iterable[ItemT]) -> list[ItemT]:
        """Add ``items`` in order, raising on the first rejected one.

        Items added before the failure stay in the repository.

        Raises:
            DuplicateKeyError: an item id is already present.
            InvalidQuantityError: an item carries a negative quantity.
        """
        added = [repo.add(item).unwrap() for item in items]
        logger.info("seed_completed", repository=repo.name, count=len(added))
        return added

    # -- Isolated operations -----------------------------------------------

    def increase_stock(
        self,
        repo: InventoryRepository[ItemT],
        item_id: Hashable,
        delta: int,
    ) -> StockOutcome:
        """Add ``delta`` (which may be negative) to the stored quantity.

        The store is untouched when the id is absent or the resulting
        quantity would be negative.
        """
        with repo.locked():
            result = repo.get_by_id(item_id).flat_map(
                lambda item: self._apply_delta(repo, item, delta)
            )
        match result:
            case Ok(item):
                logger.info(
                    "stock_adjusted",
                    repository=repo.name,
                    item_id=item_id,
                    delta=delta,
                    quantity=item.quantity,
                )
                return StockOutcome(StockAction.ADJUST, item_id, True, quantity=item.quantity)
            case Err(error):
                return self._report(StockAction.ADJUST, item_id, error, delta=delta)

    def decrease_stock(
        self,
        repo: InventoryRepository[ItemT],
        item_id: Hashable,
        amount: int,
    ) -> StockOutcome:
        """Remove ``amount`` units; shorthand for ``increase_stock(-amount)``."""
        return self.increase_stock(repo, item_id, -amount)

    def remove_item_by_id(
        self,
        repo: InventoryRepository[ItemT],
        item_id: Hashable,
    ) -> StockOutcome:
        """Remove the item; an absent id is reported, not raised."""
        match repo.remove(item_id):
            case Ok(item):
                logger.info("item_removed", repository=repo.name, item_id=item_id)
                return StockOutcome(StockAction.REMOVE, item_id, True, quantity=item.quantity)
            case Err(error):
                return self._report(StockAction.REMOVE, item_id, error)

    def adjust_many(
        self,
        repo: InventoryRepository[ItemT],
        adjustments: Iterable[tuple[Hashable, int]],
    ) -> list[StockOutcome]:
        """Apply ``(item_id, delta)`` pairs in order, one outcome per pair."""
        with LogContext(batch_repository=repo.name):
            outcomes = [
                self.increase_stock(repo, item_id, delta)
                for item_id, delta in adjustments
            ]
        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        logger.info(
            "stock_batch_completed",
            repository=repo.name,
            total=len(outcomes),
            failed=failed,
        )
        return outcomes

    # -- Internals ---------------------------------------------------------

    @staticmethod
    def _apply_delta(
        repo: InventoryRepository[ItemT],
        item: ItemT,
        delta: int,
    ) -> Result[ItemT]:
        new_quantity = item.quantity + delta
        if new_quantity < 0:
            return Err(InvalidQuantityError(
                new_quantity,
                item_id=item.id,
                message=(
                    f"Resulting quantity cannot be negative "
                    f"(have {item.quantity}, delta {delta})."
                ),
            ).with_context(repository=repo.name, operation="increase_stock"))
        return repo.update_quantity(item.id, new_quantity)

    @staticmethod
    def _report(
        action: StockAction,
        item_id: Hashable,
        error: Exception,
        **fields: Any,
    ) -> StockOutcome:
        if not isinstance(error, StockroomError) or error.kind not in _ISOLATED_KINDS:
            raise error
        payload = {
            **error.context.to_dict(),
            **fields,
            "item_id": item_id,
            "kind": error.kind.value,
            "error": error.message,
        }
        logger.warning(_FAILURE_EVENTS[action], **payload)
        return StockOutcome(action, item_id, False, error=error)


__all__ = [
    "StockAction",
    "StockOutcome",
    "StockManager",
]
