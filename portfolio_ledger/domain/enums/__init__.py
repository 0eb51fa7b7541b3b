"""Domain enums.

Usage:
    from portfolio_ledger.domain.enums import GoalStatus, RecordKind
"""

from portfolio_ledger.domain.enums.goal_status import GoalStatus
from portfolio_ledger.domain.enums.record_kind import RecordKind

__all__ = ["GoalStatus", "RecordKind"]
