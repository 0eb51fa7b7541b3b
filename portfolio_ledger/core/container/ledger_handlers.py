"""Ledger handler factories.

Each call builds a handler wired to the application-scoped repository,
event bus and clock.

Usage:
    handler = get_add_asset_handler()
    result = handler.handle(AddAsset(...))
"""

from typing import TYPE_CHECKING

from portfolio_ledger.core.config import settings
from portfolio_ledger.core.container.events import get_event_bus
from portfolio_ledger.core.container.infrastructure import get_clock
from portfolio_ledger.core.container.repositories import (
    get_ledger_repository,
    get_portfolio_guard,
)

if TYPE_CHECKING:
    from portfolio_ledger.application.commands.handlers import (
        AddAssetHandler,
        CreateGoalHandler,
        InitializePortfolioHandler,
        RecordTransactionHandler,
        UpdateAssetHandler,
        UpdateGoalProgressHandler,
    )
    from portfolio_ledger.application.queries.handlers import (
        GetPortfolioHandler,
        ListAssetsHandler,
        ListGoalsHandler,
        ListTransactionsHandler,
        ReconcilePortfolioHandler,
    )


# ============================================================================
# Command Handlers
# ============================================================================


def get_initialize_portfolio_handler() -> "InitializePortfolioHandler":
    """Get InitializePortfolio command handler.

    Returns:
        InitializePortfolioHandler instance.
    """
    from portfolio_ledger.application.commands.handlers import (
        InitializePortfolioHandler,
    )

    return InitializePortfolioHandler(
        ledger_repo=get_ledger_repository(),
        guard=get_portfolio_guard(),
        event_bus=get_event_bus(),
        clock=get_clock(),
    )


def get_add_asset_handler() -> "AddAssetHandler":
    """Get AddAsset command handler.

    Returns:
        AddAssetHandler instance.
    """
    from portfolio_ledger.application.commands.handlers import AddAssetHandler

    return AddAssetHandler(
        ledger_repo=get_ledger_repository(),
        guard=get_portfolio_guard(),
        event_bus=get_event_bus(),
        clock=get_clock(),
    )


def get_update_asset_handler() -> "UpdateAssetHandler":
    """Get UpdateAsset command handler.

    Returns:
        UpdateAssetHandler instance.
    """
    from portfolio_ledger.application.commands.handlers import UpdateAssetHandler

    return UpdateAssetHandler(
        ledger_repo=get_ledger_repository(),
        guard=get_portfolio_guard(),
        event_bus=get_event_bus(),
        clock=get_clock(),
    )


def get_record_transaction_handler() -> "RecordTransactionHandler":
    """Get RecordTransaction command handler.

    Returns:
        RecordTransactionHandler instance.
    """
    from portfolio_ledger.application.commands.handlers import (
        RecordTransactionHandler,
    )

    return RecordTransactionHandler(
        ledger_repo=get_ledger_repository(),
        guard=get_portfolio_guard(),
        event_bus=get_event_bus(),
        clock=get_clock(),
    )


def get_create_goal_handler() -> "CreateGoalHandler":
    """Get CreateGoal command handler.

    Returns:
        CreateGoalHandler instance.
    """
    from portfolio_ledger.application.commands.handlers import CreateGoalHandler

    return CreateGoalHandler(
        ledger_repo=get_ledger_repository(),
        guard=get_portfolio_guard(),
        event_bus=get_event_bus(),
        clock=get_clock(),
    )


def get_update_goal_progress_handler() -> "UpdateGoalProgressHandler":
    """Get UpdateGoalProgress command handler.

    The completed-goal policy comes from
    settings.reject_progress_on_completed_goals.

    Returns:
        UpdateGoalProgressHandler instance.
    """
    from portfolio_ledger.application.commands.handlers import (
        UpdateGoalProgressHandler,
    )

    return UpdateGoalProgressHandler(
        ledger_repo=get_ledger_repository(),
        guard=get_portfolio_guard(),
        event_bus=get_event_bus(),
        clock=get_clock(),
        reject_progress_on_completed=settings.reject_progress_on_completed_goals,
    )


# ============================================================================
# Query Handlers
# ============================================================================


def get_get_portfolio_handler() -> "GetPortfolioHandler":
    """Get GetPortfolio query handler.

    Returns:
        GetPortfolioHandler instance.
    """
    from portfolio_ledger.application.queries.handlers import GetPortfolioHandler

    return GetPortfolioHandler(guard=get_portfolio_guard())


def get_list_assets_handler() -> "ListAssetsHandler":
    """Get ListAssets query handler.

    Returns:
        ListAssetsHandler instance.
    """
    from portfolio_ledger.application.queries.handlers import ListAssetsHandler

    return ListAssetsHandler(
        ledger_repo=get_ledger_repository(), guard=get_portfolio_guard()
    )


def get_list_transactions_handler() -> "ListTransactionsHandler":
    """Get ListTransactions query handler.

    Returns:
        ListTransactionsHandler instance.
    """
    from portfolio_ledger.application.queries.handlers import (
        ListTransactionsHandler,
    )

    return ListTransactionsHandler(
        ledger_repo=get_ledger_repository(), guard=get_portfolio_guard()
    )


def get_list_goals_handler() -> "ListGoalsHandler":
    """Get ListGoals query handler.

    Returns:
        ListGoalsHandler instance.
    """
    from portfolio_ledger.application.queries.handlers import ListGoalsHandler

    return ListGoalsHandler(
        ledger_repo=get_ledger_repository(), guard=get_portfolio_guard()
    )


def get_reconcile_portfolio_handler() -> "ReconcilePortfolioHandler":
    """Get ReconcilePortfolio query handler.

    Returns:
        ReconcilePortfolioHandler instance.
    """
    from portfolio_ledger.application.queries.handlers import (
        ReconcilePortfolioHandler,
    )

    return ReconcilePortfolioHandler(
        ledger_repo=get_ledger_repository(), guard=get_portfolio_guard()
    )
