"""Ledger query handlers."""

from portfolio_ledger.application.queries.handlers.get_portfolio_handler import (
    GetPortfolioHandler,
)
from portfolio_ledger.application.queries.handlers.list_records_handlers import (
    ListAssetsHandler,
    ListGoalsHandler,
    ListTransactionsHandler,
)
from portfolio_ledger.application.queries.handlers.reconcile_portfolio_handler import (
    ReconcilePortfolioHandler,
)

__all__ = [
    "GetPortfolioHandler",
    "ListAssetsHandler",
    "ListGoalsHandler",
    "ListTransactionsHandler",
    "ReconcilePortfolioHandler",
]
