"""RecordTransaction command handler.

Appends an immutable transaction record. Portfolio totals are unaffected;
only portfolio.updated_at moves.

Note:
    transaction_id is not checked for uniqueness. Each call mints a fresh
    record key, so duplicates get distinct addresses.
"""

from collections.abc import Callable
from uuid import UUID

from uuid_extensions import uuid7

from portfolio_ledger.application.commands.ledger_commands import RecordTransaction
from portfolio_ledger.application.services.ledger_failures import (
    field_failure,
    rejection_event,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.constants import TRANSACTION_ADDRESS_DOMAIN
from portfolio_ledger.core.errors import DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import TransactionRecord
from portfolio_ledger.domain.events.ledger_events import TransactionRecorded
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import InvalidFieldError


class RecordTransactionHandler:
    """Handler for RecordTransaction command.

    Dependencies (injected via constructor):
        - LedgerRepository: For persistence
        - PortfolioGuard: For address/ownership checks
        - EventBusProtocol: For domain events
        - ClockProtocol: For timestamps
        - record_key_factory: Mints record keys (uuid7 by default)
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        guard: PortfolioGuard,
        event_bus: EventBusProtocol,
        clock: ClockProtocol,
        record_key_factory: Callable[[], UUID] = uuid7,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            ledger_repo: Ledger record repository.
            guard: Portfolio guard service.
            event_bus: Event bus for publishing domain events.
            clock: Time source.
            record_key_factory: Factory for new record keys.
        """
        self._ledger_repo = ledger_repo
        self._guard = guard
        self._event_bus = event_bus
        self._clock = clock
        self._record_key_factory = record_key_factory

    def handle(
        self, cmd: RecordTransaction
    ) -> Result[TransactionRecord, DomainError]:
        """Handle RecordTransaction command.

        Args:
            cmd: RecordTransaction command.

        Returns:
            Success(TransactionRecord): Record appended.
            Failure(DomainError): InvalidAddress, PortfolioNotFound,
                Unauthorized or InvalidInput. Nothing is written.

        Side Effects:
            - Persists new record and touched portfolio (on success)
            - Publishes TransactionRecorded or LedgerOperationRejected
        """
        result = self._record(cmd)

        if isinstance(result, Failure):
            self._event_bus.publish(
                rejection_event(
                    operation="RecordTransaction",
                    caller=cmd.caller,
                    portfolio_address=cmd.portfolio_address,
                    error=result.error,
                )
            )

        return result

    def _record(
        self, cmd: RecordTransaction
    ) -> Result[TransactionRecord, DomainError]:
        portfolio_result = self._guard.load_owned_portfolio(
            caller=cmd.caller,
            owner_identity=cmd.owner_identity,
            disambiguator=cmd.disambiguator,
            portfolio_address=cmd.portfolio_address,
        )
        if isinstance(portfolio_result, Failure):
            return portfolio_result
        portfolio = portfolio_result.value

        now = self._clock.now()
        try:
            record = TransactionRecord(
                address=self._guard.record_address(
                    TRANSACTION_ADDRESS_DOMAIN,
                    portfolio,
                    self._record_key_factory(),
                ),
                portfolio_address=portfolio.address,
                transaction_id=cmd.transaction_id,
                amount=cmd.amount,
                transaction_type=cmd.transaction_type,
                category=cmd.category,
                description=cmd.description,
                timestamp=now,
            )
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        portfolio.touch(now)
        self._ledger_repo.save_all(created=[record], updated=[portfolio])

        self._event_bus.publish(
            TransactionRecorded(
                portfolio_address=portfolio.address.value,
                record_address=record.address.value,
                transaction_id=record.transaction_id,
                amount=record.amount,
                transaction_type=record.transaction_type,
            )
        )

        return Success(value=record)
