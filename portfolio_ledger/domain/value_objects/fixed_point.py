"""Fixed-point arithmetic for ledger quantities.

Amounts, prices and totals are integers scaled by 1,000,000 (six decimal
places). Stored quantities are unsigned 64-bit; transaction amounts are signed
64-bit. Python integers never wrap, so products are computed exactly and the
64-bit bounds are enforced explicitly on every value that gets stored.

Error Handling:
    Bound violations raise FixedPointOverflowError or AggregateUnderflowError
    (ArithmeticError subclasses), the same way Money raises on currency
    mismatch. Handlers translate them into LedgerIntegrityError results.

Usage:
    from portfolio_ledger.domain.value_objects.fixed_point import (
        checked_add,
        position_value,
    )

    value = position_value(1_000_000, 50_000_000_000)  # 50_000_000_000
    total = checked_add(total, value)
"""

SCALE = 1_000_000
"""Six decimal places."""

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class FixedPointOverflowError(ArithmeticError):
    """Raised when a stored quantity would leave the unsigned 64-bit range."""

    def __init__(self, operation: str, result: int) -> None:
        """Initialize overflow error.

        Args:
            operation: Name of the arithmetic step that overflowed.
            result: The out-of-range result.
        """
        super().__init__(f"{operation} overflows unsigned 64-bit range: {result}")
        self.operation = operation
        self.result = result


class AggregateUnderflowError(ArithmeticError):
    """Raised when an aggregate would become negative.

    Only possible when the aggregate already disagreed with its components.
    """

    def __init__(self, total: int, old_value: int, new_value: int) -> None:
        """Initialize underflow error.

        Args:
            total: Aggregate before the adjustment.
            old_value: Component value being removed.
            new_value: Component value being added.
        """
        super().__init__(
            f"Aggregate {total} - {old_value} + {new_value} is negative"
        )
        self.total = total
        self.old_value = old_value
        self.new_value = new_value


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_unsigned(value: object) -> bool:
    """Check value is an int inside [0, U64_MAX].

    Args:
        value: Candidate quantity.

    Returns:
        True if value fits an unsigned 64-bit slot.
    """
    return _is_int(value) and 0 <= value <= U64_MAX  # type: ignore[operator]


def is_signed(value: object) -> bool:
    """Check value is an int inside [I64_MIN, I64_MAX].

    Args:
        value: Candidate signed amount.

    Returns:
        True if value fits a signed 64-bit slot.
    """
    return _is_int(value) and I64_MIN <= value <= I64_MAX  # type: ignore[operator]


def position_value(amount: int, price_usd: int) -> int:
    """Compute the USD value of a position.

    floor(amount * price_usd / SCALE) with an exact intermediate. The full
    product of two u64 values needs 128 bits; the result can itself exceed
    U64_MAX, which callers catch when adding it to an aggregate.

    Args:
        amount: Unsigned scaled quantity.
        price_usd: Unsigned scaled unit price.

    Returns:
        Scaled USD value (non-negative).

    Raises:
        ValueError: If either operand is outside the unsigned range.

    Example:
        >>> position_value(2_000_000, 50_000_000_000)
        100000000000
    """
    if not is_unsigned(amount) or not is_unsigned(price_usd):
        raise ValueError("Position operands must be unsigned 64-bit integers")
    return (amount * price_usd) // SCALE


def checked_add(
    current: int,
    increment: int,
    operation: str = "checked_add",
) -> int:
    """Add two unsigned quantities, rejecting results above U64_MAX.

    Args:
        current: Existing unsigned value.
        increment: Non-negative amount to add.
        operation: Name of the quantity being updated (for the error).

    Returns:
        The sum.

    Raises:
        FixedPointOverflowError: If the sum does not fit in 64 bits.
    """
    result = current + increment
    if result > U64_MAX:
        raise FixedPointOverflowError(operation, result)
    return result


def rebalance(total: int, old_value: int, new_value: int) -> int:
    """Replace one component of an aggregate: total - old_value + new_value.

    The intermediate is signed (plain int), so removing old_value first never
    wraps even if it exceeds the running total.

    Args:
        total: Current aggregate.
        old_value: Component value before the change.
        new_value: Component value after the change.

    Returns:
        The adjusted aggregate.

    Raises:
        AggregateUnderflowError: If the result is negative.
        FixedPointOverflowError: If the result exceeds U64_MAX.
    """
    result = total - old_value + new_value
    if result < 0:
        raise AggregateUnderflowError(total, old_value, new_value)
    if result > U64_MAX:
        raise FixedPointOverflowError("rebalance", result)
    return result


def to_decimal_string(scaled: int) -> str:
    """Render a scaled integer with six decimal places.

    Args:
        scaled: Scaled integer (may be negative).

    Returns:
        Decimal string, e.g. "50000.000000".
    """
    sign = "-" if scaled < 0 else ""
    whole, frac = divmod(abs(scaled), SCALE)
    return f"{sign}{whole}.{frac:06d}"
