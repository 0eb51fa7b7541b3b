"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Handlers run
synchronously in subscription order, after the publishing operation has
committed.

Architecture:
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Handler failures logged at WARNING, never raised to the publisher
"""

from collections import defaultdict

from portfolio_ledger.domain.events.base_event import DomainEvent
from portfolio_ledger.domain.protocols.event_bus_protocol import EventHandler
from portfolio_ledger.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe. Subscriptions happen at container wiring time.

    Attributes:
        _handlers: Event class → handlers in subscription order.
        _logger: Logger for handler failures and publishing.

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe(AssetAdded, logging_handler.handle_asset_added)
        >>> bus.publish(AssetAdded(...))
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning) and publishing (debug).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(
            list
        )
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (exact type match only).
            handler: Callable invoked with each published event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Call each handler; log any exception (warning level)
            4. Return (never raise handler exceptions)
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:  # noqa: BLE001 - fail-open contract
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Return the number of handlers subscribed to event_type.

        Args:
            event_type: Event class.

        Returns:
            int: Subscribed handler count.
        """
        return len(self._handlers.get(event_type, []))
