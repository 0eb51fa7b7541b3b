"""Domain events.

Usage:
    from portfolio_ledger.domain.events import AssetAdded, DomainEvent
"""

from portfolio_ledger.domain.events.base_event import DomainEvent
from portfolio_ledger.domain.events.ledger_events import (
    AssetAdded,
    AssetUpdated,
    GoalCompleted,
    GoalCreated,
    GoalProgressUpdated,
    LedgerOperationRejected,
    PortfolioInitialized,
    TransactionRecorded,
)

__all__ = [
    "DomainEvent",
    "AssetAdded",
    "AssetUpdated",
    "GoalCompleted",
    "GoalCreated",
    "GoalProgressUpdated",
    "LedgerOperationRejected",
    "PortfolioInitialized",
    "TransactionRecorded",
]
