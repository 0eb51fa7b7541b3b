"""Ledger DTOs returned by query handlers."""

from portfolio_ledger.application.dtos.ledger_dtos import (
    PortfolioSummary,
    ReconciliationReport,
)

__all__ = ["PortfolioSummary", "ReconciliationReport"]
