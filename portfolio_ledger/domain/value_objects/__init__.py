"""Domain value objects.

Usage:
    from portfolio_ledger.domain.value_objects import Address
"""

from portfolio_ledger.domain.value_objects.address import Address
from portfolio_ledger.domain.value_objects.fixed_point import (
    SCALE,
    U64_MAX,
    AggregateUnderflowError,
    FixedPointOverflowError,
)

__all__ = [
    "Address",
    "SCALE",
    "U64_MAX",
    "AggregateUnderflowError",
    "FixedPointOverflowError",
]
