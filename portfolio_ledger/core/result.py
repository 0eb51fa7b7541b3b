"""Result types for railway-oriented programming.

Ledger operations return values instead of raising for business failures.
Callers branch on the variant explicitly.

Usage:
    def parse_units(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="Units must be digits")
        return Success(value=int(raw))

    match parse_units("1000000"):
        case Success(value=units):
            print(f"Units: {units}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
