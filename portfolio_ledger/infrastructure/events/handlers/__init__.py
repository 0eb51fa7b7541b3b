"""Event handlers subscribed by the container."""

from portfolio_ledger.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
