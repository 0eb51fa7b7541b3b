"""Application services shared by ledger handlers."""

from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard

__all__ = ["PortfolioGuard"]
