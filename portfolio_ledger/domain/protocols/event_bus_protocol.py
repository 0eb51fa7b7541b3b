"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides adapters.

Implementations:
    - InMemoryEventBus: portfolio_ledger/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(AssetAdded, handle_asset_added)
    >>> event_bus.publish(AssetAdded(...))
"""

from collections.abc import Callable
from typing import Protocol

from portfolio_ledger.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], None]
"""Synchronous event handler: takes one event, returns None.

Ledger operations are synchronous units, so handlers run inline after the
operation has committed.
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never reaches the publisher.
        2. **Type-based routing**: Handlers receive only their event type.
        3. **Registration order**: Handlers run in subscription order.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (exact type match).
            handler: Callable invoked with each published event.
        """
        ...

    def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Notes:
            - No handlers = no-op
            - NEVER raises handler exceptions (fail-open)
        """
        ...
