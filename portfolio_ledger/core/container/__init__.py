"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from portfolio_ledger.core.container import get_add_asset_handler

The container is organized into modules:
- infrastructure: Logger, database, clock, address deriver
- events: Event bus and subscriptions
- repositories: Ledger repository and portfolio guard
- ledger_handlers: Command and query handler factories
"""

# Infrastructure services
from portfolio_ledger.core.container.infrastructure import (
    get_address_deriver,
    get_clock,
    get_database,
    get_logger,
)

# Event bus
from portfolio_ledger.core.container.events import get_event_bus

# Repositories
from portfolio_ledger.core.container.repositories import (
    get_ledger_repository,
    get_portfolio_guard,
)

# Handlers
from portfolio_ledger.core.container.ledger_handlers import (
    get_add_asset_handler,
    get_create_goal_handler,
    get_get_portfolio_handler,
    get_initialize_portfolio_handler,
    get_list_assets_handler,
    get_list_goals_handler,
    get_list_transactions_handler,
    get_reconcile_portfolio_handler,
    get_record_transaction_handler,
    get_update_asset_handler,
    get_update_goal_progress_handler,
)

__all__ = [
    "get_add_asset_handler",
    "get_address_deriver",
    "get_clock",
    "get_create_goal_handler",
    "get_database",
    "get_event_bus",
    "get_get_portfolio_handler",
    "get_initialize_portfolio_handler",
    "get_ledger_repository",
    "get_list_assets_handler",
    "get_list_goals_handler",
    "get_list_transactions_handler",
    "get_logger",
    "get_portfolio_guard",
    "get_reconcile_portfolio_handler",
    "get_record_transaction_handler",
    "get_update_asset_handler",
    "get_update_goal_progress_handler",
]
