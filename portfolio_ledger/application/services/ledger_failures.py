"""Conversions from domain exceptions to Result errors.

Entities and value objects raise (InvalidFieldError, FixedPointOverflowError,
AggregateUnderflowError); handlers return values. These helpers are the one
place where the former become the latter, so every operation reports the
same error for the same failure.
"""

from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import DomainError, ValidationError
from portfolio_ledger.domain.errors import LedgerError, LedgerIntegrityError
from portfolio_ledger.domain.events.ledger_events import LedgerOperationRejected
from portfolio_ledger.domain.validators import InvalidFieldError
from portfolio_ledger.domain.value_objects.fixed_point import AggregateUnderflowError


def field_failure(error: InvalidFieldError) -> ValidationError:
    """Convert a validator exception into a ValidationError.

    Args:
        error: Raised InvalidFieldError.

    Returns:
        ValidationError carrying the validator's code and field.
    """
    return ValidationError(code=error.code, message=str(error), field=error.field)


def integrity_failure(
    error: ArithmeticError,
    *,
    resource_id: str,
    overflow_message: str,
) -> LedgerIntegrityError:
    """Convert a fixed-point arithmetic exception into a LedgerIntegrityError.

    Args:
        error: FixedPointOverflowError or AggregateUnderflowError.
        resource_id: Address of the record whose quantity failed.
        overflow_message: LedgerError message used for overflows.

    Returns:
        AGGREGATE_CORRUPTION for underflow, ARITHMETIC_OVERFLOW otherwise.
    """
    if isinstance(error, AggregateUnderflowError):
        return LedgerIntegrityError(
            code=ErrorCode.AGGREGATE_CORRUPTION,
            message=LedgerError.AGGREGATE_CORRUPTION,
            resource_id=resource_id,
            details={"reason": str(error)},
        )
    return LedgerIntegrityError(
        code=ErrorCode.ARITHMETIC_OVERFLOW,
        message=overflow_message,
        resource_id=resource_id,
        details={"reason": str(error)},
    )


def rejection_event(
    *,
    operation: str,
    caller: str,
    portfolio_address: str | None,
    error: DomainError,
) -> LedgerOperationRejected:
    """Build the event published when an operation fails.

    Args:
        operation: Command class name.
        caller: Identity that invoked the operation.
        portfolio_address: Claimed portfolio address.
        error: The failure returned to the caller.

    Returns:
        LedgerOperationRejected event.
    """
    return LedgerOperationRejected(
        operation=operation,
        caller=caller,
        portfolio_address=portfolio_address,
        error_code=error.code.value,
        reason=error.message,
    )
