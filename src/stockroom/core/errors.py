"""
Structured error types for stockroom.

Provides a small, typed error taxonomy with rich metadata for inventory
operations. Every error carries a kind that callers branch on, plus an
ErrorContext naming the repository, operation and item involved.

Errors are ordinary exceptions so they can be raised where raising is the
contract (seeding), but the repository never raises them: it hands them back
inside ``Err`` values (see :mod:`stockroom.core.result`).

Manifesto:
    - **Kind over class:** Callers test ``error.kind``, not isinstance chains
    - **One failure per call:** An operation reports exactly one kind
    - **Rich Context:** Errors carry repository/operation/item metadata
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      StockroomError                          │
        │               (kind, context, cause)                         │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  DuplicateKeyError   NotFoundError    InvalidQuantityError   │
        │  (DUPLICATE_KEY)     (NOT_FOUND)      (INVALID_QUANTITY)     │
        │                                                              │
        │  ConfigError                                                 │
        │  (CONFIG)                                                    │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = NotFoundError(999)
    >>> error.kind
    <ErrorKind.NOT_FOUND: 'NOT_FOUND'>
    >>> error.with_context(repository="groceries").context.repository
    'groceries'

Guardrails:
    ❌ DON'T: Raise repository failures - return them in Err
    ✅ DO: Reserve raising for seeding and configuration bugs

    ❌ DON'T: Parse messages to decide what went wrong
    ✅ DO: Compare ``error.kind`` against ErrorKind members

Tags:
    error-handling, exception-hierarchy, error-context, stockroom
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """
    Enumerable failure kinds.

    The first three are the core taxonomy: every repository and manager
    failure is one of them. CONFIG and INTERNAL cover the ambient layers
    (settings, manager wiring, foreign exceptions).
    """

    DUPLICATE_KEY = "DUPLICATE_KEY"        # add with an id already present
    NOT_FOUND = "NOT_FOUND"                # lookup/remove/update of absent id
    INVALID_QUANTITY = "INVALID_QUANTITY"  # negative quantity set or derived

    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields for the metadata every inventory failure has in common;
    anything else goes in ``metadata``. ``to_dict()`` serializes only the
    fields that are set, so it can be splatted straight into a log call.
    """

    repository: str | None = None
    operation: str | None = None
    item_id: Hashable | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["repository", "operation", "item_id"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class StockroomError(Exception):
    """
    Base exception for all stockroom errors.

    Subclasses set ``default_kind``; an explicit ``kind=`` overrides it.
    When ``cause`` is given it is chained as ``__cause__`` so tracebacks show
    the root failure.

    Examples:
        >>> err = StockroomError("boom")
        >>> err.kind
        <ErrorKind.INTERNAL: 'INTERNAL'>
        >>> err.to_dict()["error_type"]
        'StockroomError'
    """

    default_kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> StockroomError:
        """
        Add context to this error (fluent API).

        Usage:
            return Err(NotFoundError(item_id).with_context(
                repository="electronics", operation="remove"
            ))
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "kind": self.kind.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, kind={self.kind.value})"


# =============================================================================
# CORE TAXONOMY
# =============================================================================


class DuplicateKeyError(StockroomError):
    """An item with the same id is already stored."""

    default_kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, item_id: Hashable, message: str | None = None, **kwargs: Any):
        self.item_id = item_id
        super().__init__(
            message or f"An item with id {item_id!r} already exists.",
            context=ErrorContext(item_id=item_id),
            **kwargs,
        )


class NotFoundError(StockroomError):
    """No item is stored under the requested id."""

    default_kind = ErrorKind.NOT_FOUND

    def __init__(self, item_id: Hashable, message: str | None = None, **kwargs: Any):
        self.item_id = item_id
        super().__init__(
            message or f"No item found with id {item_id!r}.",
            context=ErrorContext(item_id=item_id),
            **kwargs,
        )


class InvalidQuantityError(StockroomError):
    """A negative or non-integer quantity was supplied or would have resulted."""

    default_kind = ErrorKind.INVALID_QUANTITY

    def __init__(
        self,
        quantity: int,
        *,
        item_id: Hashable | None = None,
        message: str | None = None,
        **kwargs: Any,
    ):
        self.quantity = quantity
        self.item_id = item_id
        super().__init__(
            message or f"Quantity must be a non-negative integer (got {quantity!r}).",
            context=ErrorContext(item_id=item_id),
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["quantity"] = self.quantity
        return result


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(StockroomError):
    """
    Configuration or wiring error.

    Raised, never returned: a missing repository kind is a programming bug.
    """

    default_kind = ErrorKind.CONFIG


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: Exception) -> ErrorKind:
    """Get the kind of an error, mapping common foreign exceptions."""
    if isinstance(error, StockroomError):
        return error.kind
    if isinstance(error, LookupError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, ValueError):
        return ErrorKind.INVALID_QUANTITY
    return ErrorKind.INTERNAL


__all__ = [
    "ErrorKind",
    "ErrorContext",
    "StockroomError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidQuantityError",
    "ConfigError",
    "categorize_error",
]
