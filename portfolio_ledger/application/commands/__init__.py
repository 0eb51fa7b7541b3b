"""Ledger commands (CQRS write side)."""

from portfolio_ledger.application.commands.ledger_commands import (
    AddAsset,
    CreateGoal,
    InitializePortfolio,
    RecordTransaction,
    UpdateAsset,
    UpdateGoalProgress,
)

__all__ = [
    "AddAsset",
    "CreateGoal",
    "InitializePortfolio",
    "RecordTransaction",
    "UpdateAsset",
    "UpdateGoalProgress",
]
