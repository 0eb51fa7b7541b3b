"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Configures every
ledger event subscription at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio_ledger.domain.protocols.event_bus_protocol import (
        EventBusProtocol,
    )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        LoggingEventHandler → every ledger event

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        event_bus = get_event_bus()
        event_bus.publish(PortfolioInitialized(...))
    """
    from portfolio_ledger.core.container.infrastructure import get_logger
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
    from portfolio_ledger.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from portfolio_ledger.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    event_bus = InMemoryEventBus(logger=get_logger())
    logging_handler = LoggingEventHandler(logger=get_logger())

    event_bus.subscribe(
        PortfolioInitialized, logging_handler.handle_portfolio_initialized
    )
    event_bus.subscribe(AssetAdded, logging_handler.handle_asset_added)
    event_bus.subscribe(AssetUpdated, logging_handler.handle_asset_updated)
    event_bus.subscribe(
        TransactionRecorded, logging_handler.handle_transaction_recorded
    )
    event_bus.subscribe(GoalCreated, logging_handler.handle_goal_created)
    event_bus.subscribe(
        GoalProgressUpdated, logging_handler.handle_goal_progress_updated
    )
    event_bus.subscribe(GoalCompleted, logging_handler.handle_goal_completed)
    event_bus.subscribe(
        LedgerOperationRejected, logging_handler.handle_operation_rejected
    )

    return event_bus
