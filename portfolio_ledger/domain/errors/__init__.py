"""Domain errors package.

Usage:
    from portfolio_ledger.domain.errors import LedgerError, LedgerIntegrityError
"""

from portfolio_ledger.domain.errors.ledger_error import LedgerError
from portfolio_ledger.domain.errors.ledger_integrity_error import (
    LedgerIntegrityError,
)

__all__ = ["LedgerError", "LedgerIntegrityError"]
