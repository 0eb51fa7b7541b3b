"""Common error classes shared by every ledger operation.

Error Types:
- ValidationError: Input validation failures (lengths, amounts, addresses)
- NotFoundError: Referenced record missing or not owned by the portfolio
- ConflictError: Duplicate creation or forbidden state transition
- AuthorizationError: Caller is not the portfolio owner

Usage:
    from portfolio_ledger.core.errors import ValidationError
    from portfolio_ledger.core.enums import ErrorCode
    from portfolio_ledger.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_INPUT,
        message="Symbol exceeds 32 bytes",
        field="symbol",
    ))
"""

from dataclasses import dataclass

from portfolio_ledger.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Record not found (or not attached to the supplied portfolio).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of record (Portfolio, CryptoAsset, FinancialGoal).
        resource_id: Address of the record that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Record conflict (duplicate address, terminal state).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of record in conflict.
        conflicting_field: Field that has conflict (address, is_completed).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (caller does not own the portfolio).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Relation that was required.
        details: Additional context.
    """

    required_permission: str | None = None
