"""Ledger queries (CQRS read side)."""

from portfolio_ledger.application.queries.ledger_queries import (
    GetPortfolio,
    ListAssets,
    ListGoals,
    ListTransactions,
    ReconcilePortfolio,
)

__all__ = [
    "GetPortfolio",
    "ListAssets",
    "ListGoals",
    "ListTransactions",
    "ReconcilePortfolio",
]
