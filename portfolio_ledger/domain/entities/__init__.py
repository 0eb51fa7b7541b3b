"""Domain entities.

Usage:
    from portfolio_ledger.domain.entities import CryptoAsset, Portfolio
"""

from portfolio_ledger.domain.entities.crypto_asset import CryptoAsset
from portfolio_ledger.domain.entities.financial_goal import FinancialGoal
from portfolio_ledger.domain.entities.portfolio import Portfolio
from portfolio_ledger.domain.entities.transaction_record import TransactionRecord

__all__ = ["CryptoAsset", "FinancialGoal", "Portfolio", "TransactionRecord"]
