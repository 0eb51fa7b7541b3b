"""Ledger command handlers."""

from portfolio_ledger.application.commands.handlers.add_asset_handler import (
    AddAssetHandler,
)
from portfolio_ledger.application.commands.handlers.create_goal_handler import (
    CreateGoalHandler,
)
from portfolio_ledger.application.commands.handlers.initialize_portfolio_handler import (
    InitializePortfolioHandler,
)
from portfolio_ledger.application.commands.handlers.record_transaction_handler import (
    RecordTransactionHandler,
)
from portfolio_ledger.application.commands.handlers.update_asset_handler import (
    UpdateAssetHandler,
)
from portfolio_ledger.application.commands.handlers.update_goal_progress_handler import (
    UpdateGoalProgressHandler,
)

__all__ = [
    "AddAssetHandler",
    "CreateGoalHandler",
    "InitializePortfolioHandler",
    "RecordTransactionHandler",
    "UpdateAssetHandler",
    "UpdateGoalProgressHandler",
]
