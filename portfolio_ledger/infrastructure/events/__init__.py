"""Event bus adapters."""

from portfolio_ledger.infrastructure.events.in_memory_event_bus import (
    InMemoryEventBus,
)

__all__ = ["InMemoryEventBus"]
