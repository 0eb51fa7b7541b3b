"""CreateGoal command handler.

Creates a savings goal in IN_PROGRESS state with zero progress.
"""

from collections.abc import Callable
from uuid import UUID

from uuid_extensions import uuid7

from portfolio_ledger.application.commands.ledger_commands import CreateGoal
from portfolio_ledger.application.services.ledger_failures import (
    field_failure,
    rejection_event,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.constants import GOAL_ADDRESS_DOMAIN
from portfolio_ledger.core.errors import DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import FinancialGoal
from portfolio_ledger.domain.events.ledger_events import GoalCreated
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import InvalidFieldError


class CreateGoalHandler:
    """Handler for CreateGoal command.

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

    def handle(self, cmd: CreateGoal) -> Result[FinancialGoal, DomainError]:
        """Handle CreateGoal command.

        Args:
            cmd: CreateGoal command.

        Returns:
            Success(FinancialGoal): Goal created (current_amount=0).
            Failure(DomainError): InvalidAddress, PortfolioNotFound,
                Unauthorized, InvalidInput or InvalidAmount.

        Side Effects:
            - Persists new goal and touched portfolio (on success)
            - Publishes GoalCreated or LedgerOperationRejected
        """
        result = self._create(cmd)

        if isinstance(result, Failure):
            self._event_bus.publish(
                rejection_event(
                    operation="CreateGoal",
                    caller=cmd.caller,
                    portfolio_address=cmd.portfolio_address,
                    error=result.error,
                )
            )

        return result

    def _create(self, cmd: CreateGoal) -> Result[FinancialGoal, DomainError]:
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
            goal = FinancialGoal(
                address=self._guard.record_address(
                    GOAL_ADDRESS_DOMAIN, portfolio, self._record_key_factory()
                ),
                portfolio_address=portfolio.address,
                name=cmd.name,
                target_amount=cmd.target_amount,
                target_date=cmd.target_date,
                category=cmd.category,
                created_at=now,
                updated_at=now,
            )
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        portfolio.touch(now)
        self._ledger_repo.save_all(created=[goal], updated=[portfolio])

        self._event_bus.publish(
            GoalCreated(
                portfolio_address=portfolio.address.value,
                goal_address=goal.address.value,
                name=goal.name,
                target_amount=goal.target_amount,
            )
        )

        return Success(value=goal)
