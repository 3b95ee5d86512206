"""
Result envelope for consistent success/failure handling.

Provides a typed Result[T] pattern that makes success/failure explicit in the
type system. Repository operations return Ok[T] on success and Err[T] carrying
a StockroomError on failure, so a caller can never mistake a rejected change
for an applied one and nothing has to be caught to keep a batch going.

Manifesto:
    - **Explicit over Implicit:** No hidden exceptions that callers might miss
    - **One failure kind per call:** Err carries exactly one typed error
    - **Functional composition:** Chain lookups and updates with flat_map
    - **Batch-friendly:** One bad item never aborts the surrounding loop

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Result[T]                                │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │     Ok[T]       │     Err[T]      │     Serialization       │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • error: Exc    │ • to_dict()             │
        │ • map()         │ • map() pass    │   (CLI JSON reports)    │
        │ • flat_map()    │ • flat_map pass │                         │
        │ • unwrap()      │ • unwrap() ⚡    │                         │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> from stockroom.core.result import Ok, Err, Result
    >>> def halve(stock: int) -> Result[int]:
    ...     if stock % 2:
    ...         return Err(ValueError("odd stock"))
    ...     return Ok(stock // 2)
    >>> match halve(10):
    ...     case Ok(value):
    ...         print(f"Half: {value}")
    ...     case Err(error):
    ...         print(f"Error: {error}")
    Half: 5

Guardrails:
    ❌ DON'T: Use unwrap() without checking is_ok() first
    ✅ DO: Use pattern matching for safe extraction

    ❌ DON'T: Raise exceptions inside map/flat_map functions
    ✅ DO: Return Err from flat_map if the operation can fail

Tags:
    result-pattern, error-handling, functional-programming, stockroom
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from stockroom.core.errors import StockroomError, categorize_error


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Successful result containing a value.

    Immutable; map() and flat_map() build new results instead of changing
    this one.

    Examples:
        >>> Ok(10).map(lambda q: q + 5).unwrap()
        15
        >>> Ok(3).flat_map(lambda q: Err(ValueError("no")) if q < 5 else Ok(q)).is_err()
        True
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value if Ok."""
        return Ok(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        value = self.value.to_dict() if hasattr(self.value, "to_dict") else self.value
        return {"ok": True, "value": value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed result containing an error.

    map() and flat_map() pass the Err through unchanged, so a failed lookup
    short-circuits the update that would have followed it.

    Examples:
        >>> from stockroom.core.errors import NotFoundError
        >>> err = Err(NotFoundError(999))
        >>> err.is_err()
        True
        >>> err.error.kind.value
        'NOT_FOUND'
        >>> err.map(lambda item: item.quantity).is_err()
        True
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Foreign exceptions get a kind from ``categorize_error`` so every
        serialized failure can be branched on the same way.
        """
        if isinstance(self.error, StockroomError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
                "kind": categorize_error(self.error).value,
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[T]


__all__ = [
    "Result",
    "Ok",
    "Err",
]
