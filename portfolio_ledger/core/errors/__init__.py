"""Core errors package.

Usage:
    from portfolio_ledger.core.errors import DomainError, ValidationError
"""

from portfolio_ledger.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from portfolio_ledger.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthorizationError",
]
