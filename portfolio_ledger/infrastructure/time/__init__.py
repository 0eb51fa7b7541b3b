"""Clock adapters."""

from portfolio_ledger.infrastructure.time.system_clock import SystemClock

__all__ = ["SystemClock"]
