"""Logging event handler for ledger events.

Structured logging for every ledger domain event.

Log Levels:
    - INFO: Committed ledger changes
    - WARNING: Rejected operations (LedgerOperationRejected)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - portfolio_address: Owning portfolio (when known)
    - error_code: Machine-readable error (rejections only)

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(AssetAdded, handler.handle_asset_added)
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
from portfolio_ledger.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of ledger events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    @staticmethod
    def _base_fields(event: DomainEvent) -> dict[str, str]:
        return {
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
        }

    # =========================================================================
    # Portfolio & Asset Events
    # =========================================================================

    def handle_portfolio_initialized(self, event: PortfolioInitialized) -> None:
        """Log portfolio creation (INFO level).

        Args:
            event: PortfolioInitialized event.
        """
        self._logger.info(
            "portfolio_initialized",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            owner=event.owner,
            disambiguator=event.disambiguator,
        )

    def handle_asset_added(self, event: AssetAdded) -> None:
        """Log asset addition (INFO level).

        Args:
            event: AssetAdded event.
        """
        self._logger.info(
            "asset_added",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            asset_address=event.asset_address,
            symbol=event.symbol,
            value_usd=event.value_usd,
            total_value_usd=event.total_value_usd,
            total_assets=event.total_assets,
        )

    def handle_asset_updated(self, event: AssetUpdated) -> None:
        """Log asset revaluation (INFO level).

        Args:
            event: AssetUpdated event.
        """
        self._logger.info(
            "asset_updated",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            asset_address=event.asset_address,
            symbol=event.symbol,
            previous_value_usd=event.previous_value_usd,
            new_value_usd=event.new_value_usd,
            total_value_usd=event.total_value_usd,
        )

    def handle_transaction_recorded(self, event: TransactionRecorded) -> None:
        """Log transaction record append (INFO level).

        Args:
            event: TransactionRecorded event.
        """
        self._logger.info(
            "transaction_recorded",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            record_address=event.record_address,
            transaction_id=event.transaction_id,
            amount=event.amount,
            transaction_type=event.transaction_type,
        )

    # =========================================================================
    # Goal Events
    # =========================================================================

    def handle_goal_created(self, event: GoalCreated) -> None:
        """Log goal creation (INFO level).

        Args:
            event: GoalCreated event.
        """
        self._logger.info(
            "goal_created",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            goal_address=event.goal_address,
            name=event.name,
            target_amount=event.target_amount,
        )

    def handle_goal_progress_updated(self, event: GoalProgressUpdated) -> None:
        """Log goal progress (INFO level).

        Args:
            event: GoalProgressUpdated event.
        """
        self._logger.info(
            "goal_progress_updated",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            goal_address=event.goal_address,
            amount_added=event.amount_added,
            current_amount=event.current_amount,
            target_amount=event.target_amount,
            is_completed=event.is_completed,
        )

    def handle_goal_completed(self, event: GoalCompleted) -> None:
        """Log goal completion (INFO level).

        Args:
            event: GoalCompleted event.
        """
        self._logger.info(
            "goal_completed",
            **self._base_fields(event),
            portfolio_address=event.portfolio_address,
            goal_address=event.goal_address,
            name=event.name,
            current_amount=event.current_amount,
            target_amount=event.target_amount,
        )

    # =========================================================================
    # Rejections
    # =========================================================================

    def handle_operation_rejected(self, event: LedgerOperationRejected) -> None:
        """Log rejected operation (WARNING level).

        Args:
            event: LedgerOperationRejected event with error details.
        """
        self._logger.warning(
            "ledger_operation_rejected",
            **self._base_fields(event),
            operation=event.operation,
            caller=event.caller,
            portfolio_address=event.portfolio_address,
            error_code=event.error_code,
            reason=event.reason,
        )
