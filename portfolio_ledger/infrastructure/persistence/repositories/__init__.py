"""Repository implementations."""

from portfolio_ledger.infrastructure.persistence.repositories.ledger_repository import (
    SqlAlchemyLedgerRepository,
)

__all__ = ["SqlAlchemyLedgerRepository"]
