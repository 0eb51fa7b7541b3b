"""Ledger integrity error.

Returned when an arithmetic bound or aggregate invariant would be violated.
Distinct from ValidationError: the inputs were well-formed, but applying them
would overflow a stored quantity or expose an already-inconsistent aggregate.

Usage:
    return Failure(error=LedgerIntegrityError(
        code=ErrorCode.ARITHMETIC_OVERFLOW,
        message=LedgerError.TOTAL_VALUE_OVERFLOW,
        resource_id=str(portfolio.address),
    ))
"""

from dataclasses import dataclass

from portfolio_ledger.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class LedgerIntegrityError(DomainError):
    """Arithmetic or aggregate invariant violation.

    Attributes:
        code: ARITHMETIC_OVERFLOW or AGGREGATE_CORRUPTION.
        message: Human-readable message.
        resource_id: Address of the record whose invariant failed.
        details: Additional context (operands, attempted result).
    """

    resource_id: str
