"""Core enums package.

Usage:
    from portfolio_ledger.core.enums import ErrorCode, Environment
"""

from portfolio_ledger.core.enums.environment import Environment
from portfolio_ledger.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
