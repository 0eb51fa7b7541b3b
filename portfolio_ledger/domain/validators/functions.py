"""Centralized validation functions for ledger inputs.

Validators are pure functions that raise InvalidFieldError (a ValueError)
on failure. The error carries the offending field and the ErrorCode the
handler reports, so handlers convert failures into ValidationError results
without re-deriving why validation failed.

Rules:
    - Strings are measured in UTF-8 bytes, never truncated
    - Unsigned quantities live in [0, 2**64 - 1]
    - Signed amounts live in [-2**63, 2**63 - 1]
    - Timestamps must be timezone-aware
"""

from datetime import datetime

from portfolio_ledger.core.constants import (
    PORTFOLIO_DISAMBIGUATOR_MAX,
    PORTFOLIO_DISAMBIGUATOR_MIN,
)
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.domain.value_objects.fixed_point import (
    I64_MAX,
    I64_MIN,
    U64_MAX,
)


class InvalidFieldError(ValueError):
    """Raised when a single input field fails validation."""

    def __init__(
        self,
        field: str,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_INPUT,
    ) -> None:
        """Initialize field error.

        Args:
            field: Name of the field that failed.
            message: Human-readable reason.
            code: Error code reported to the caller.
        """
        super().__init__(message)
        self.field = field
        self.code = code


def _require_int(value: object, field: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidFieldError(field, f"{field} must be an integer")
    return value


def validate_text(
    value: object,
    *,
    field: str,
    max_bytes: int,
    required: bool = False,
) -> str:
    """Validate a bounded variable-length string.

    Args:
        value: Candidate string.
        field: Field name for error reporting.
        max_bytes: Maximum UTF-8 encoded length.
        required: Reject empty or whitespace-only values (identities only).

    Returns:
        The value unchanged.

    Raises:
        InvalidFieldError: If value is not a string, is blank when required,
            or exceeds max_bytes.

    Example:
        >>> validate_text("BTC", field="symbol", max_bytes=32)
        'BTC'
        >>> validate_text("X" * 33, field="symbol", max_bytes=32)
        InvalidFieldError: symbol exceeds 32 bytes (33)
    """
    if not isinstance(value, str):
        raise InvalidFieldError(field, f"{field} must be a string")
    if required and not value.strip():
        raise InvalidFieldError(field, f"{field} cannot be empty")
    size = len(value.encode("utf-8"))
    if size > max_bytes:
        raise InvalidFieldError(field, f"{field} exceeds {max_bytes} bytes ({size})")
    return value


def validate_unsigned(value: object, *, field: str) -> int:
    """Validate an unsigned 64-bit quantity (zero allowed).

    Args:
        value: Candidate quantity.
        field: Field name for error reporting.

    Returns:
        The quantity.

    Raises:
        InvalidFieldError: INVALID_AMOUNT if negative, INVALID_INPUT if not an
            integer or above 2**64 - 1.
    """
    amount = _require_int(value, field)
    if amount < 0:
        raise InvalidFieldError(
            field, f"{field} cannot be negative", ErrorCode.INVALID_AMOUNT
        )
    if amount > U64_MAX:
        raise InvalidFieldError(field, f"{field} exceeds unsigned 64-bit range")
    return amount


def validate_positive(value: object, *, field: str) -> int:
    """Validate a strictly positive unsigned 64-bit quantity.

    Args:
        value: Candidate quantity.
        field: Field name for error reporting.

    Returns:
        The quantity.

    Raises:
        InvalidFieldError: INVALID_AMOUNT if zero or negative, INVALID_INPUT
            if not an integer or above 2**64 - 1.
    """
    amount = validate_unsigned(value, field=field)
    if amount == 0:
        raise InvalidFieldError(
            field, f"{field} must be greater than zero", ErrorCode.INVALID_AMOUNT
        )
    return amount


def validate_signed(value: object, *, field: str) -> int:
    """Validate a signed 64-bit amount.

    Args:
        value: Candidate amount.
        field: Field name for error reporting.

    Returns:
        The amount.

    Raises:
        InvalidFieldError: If not an integer or outside the signed range.
    """
    amount = _require_int(value, field)
    if not I64_MIN <= amount <= I64_MAX:
        raise InvalidFieldError(field, f"{field} exceeds signed 64-bit range")
    return amount


def validate_timestamp(value: object, *, field: str) -> datetime:
    """Validate a timezone-aware timestamp.

    Args:
        value: Candidate datetime.
        field: Field name for error reporting.

    Returns:
        The datetime.

    Raises:
        InvalidFieldError: If not a datetime or naive.
    """
    if not isinstance(value, datetime):
        raise InvalidFieldError(field, f"{field} must be a datetime")
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidFieldError(field, f"{field} must be timezone-aware")
    return value


def validate_disambiguator(value: object, *, field: str = "disambiguator") -> int:
    """Validate a portfolio disambiguator (one byte).

    Args:
        value: Candidate disambiguator.
        field: Field name for error reporting.

    Returns:
        The disambiguator.

    Raises:
        InvalidFieldError: If not an integer in [0, 255].
    """
    disambiguator = _require_int(value, field)
    if not (
        PORTFOLIO_DISAMBIGUATOR_MIN <= disambiguator <= PORTFOLIO_DISAMBIGUATOR_MAX
    ):
        raise InvalidFieldError(
            field,
            f"{field} must be in [{PORTFOLIO_DISAMBIGUATOR_MIN}, "
            f"{PORTFOLIO_DISAMBIGUATOR_MAX}]",
        )
    return disambiguator
