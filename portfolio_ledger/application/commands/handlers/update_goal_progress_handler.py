"""UpdateGoalProgress command handler.

Accumulates progress on a goal and completes it when the target is reached.

State Transition: IN_PROGRESS → COMPLETED (when current >= target)

Completed goals:
    By default progress on a completed goal is accepted (the goal stays
    completed and current_amount keeps growing). With
    reject_progress_on_completed=True the handler returns
    GoalAlreadyCompleted instead.
"""

from portfolio_ledger.application.commands.ledger_commands import (
    UpdateGoalProgress,
)
from portfolio_ledger.application.services.ledger_failures import (
    field_failure,
    integrity_failure,
    rejection_event,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import ConflictError, DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import FinancialGoal
from portfolio_ledger.domain.errors import LedgerError
from portfolio_ledger.domain.events.ledger_events import (
    GoalCompleted,
    GoalProgressUpdated,
)
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import InvalidFieldError, validate_positive
from portfolio_ledger.domain.value_objects.fixed_point import (
    FixedPointOverflowError,
)


class UpdateGoalProgressHandler:
    """Handler for UpdateGoalProgress command.

    Dependencies (injected via constructor):
        - LedgerRepository: For persistence
        - PortfolioGuard: For address/ownership/back-reference checks
        - EventBusProtocol: For domain events
        - ClockProtocol: For timestamps
        - reject_progress_on_completed: Completed-goal policy (from settings)
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        guard: PortfolioGuard,
        event_bus: EventBusProtocol,
        clock: ClockProtocol,
        reject_progress_on_completed: bool = False,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            ledger_repo: Ledger record repository.
            guard: Portfolio guard service.
            event_bus: Event bus for publishing domain events.
            clock: Time source.
            reject_progress_on_completed: Return GoalAlreadyCompleted for
                progress on completed goals.
        """
        self._ledger_repo = ledger_repo
        self._guard = guard
        self._event_bus = event_bus
        self._clock = clock
        self._reject_progress_on_completed = reject_progress_on_completed

    def handle(self, cmd: UpdateGoalProgress) -> Result[FinancialGoal, DomainError]:
        """Handle UpdateGoalProgress command.

        Args:
            cmd: UpdateGoalProgress command.

        Returns:
            Success(FinancialGoal): Progress recorded.
            Failure(DomainError): InvalidAddress, PortfolioNotFound,
                Unauthorized, GoalNotFound, InvalidAmount,
                GoalAlreadyCompleted or Overflow. Nothing is written.

        Side Effects:
            - Persists updated goal and portfolio (on success)
            - Publishes GoalProgressUpdated (and GoalCompleted on the
              completing call) or LedgerOperationRejected
        """
        result = self._update(cmd)

        if isinstance(result, Failure):
            self._event_bus.publish(
                rejection_event(
                    operation="UpdateGoalProgress",
                    caller=cmd.caller,
                    portfolio_address=cmd.portfolio_address,
                    error=result.error,
                )
            )

        return result

    def _update(self, cmd: UpdateGoalProgress) -> Result[FinancialGoal, DomainError]:
        # Step 1: Portfolio address, existence, ownership
        portfolio_result = self._guard.load_owned_portfolio(
            caller=cmd.caller,
            owner_identity=cmd.owner_identity,
            disambiguator=cmd.disambiguator,
            portfolio_address=cmd.portfolio_address,
        )
        if isinstance(portfolio_result, Failure):
            return portfolio_result
        portfolio = portfolio_result.value

        # Step 2: Goal must reference this portfolio
        goal_result = self._guard.load_goal(portfolio, cmd.goal_address)
        if isinstance(goal_result, Failure):
            return goal_result
        goal = goal_result.value

        # Step 3: Amount and completed-goal policy
        try:
            validate_positive(cmd.amount_to_add, field="amount_to_add")
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        if goal.is_completed and self._reject_progress_on_completed:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.GOAL_ALREADY_COMPLETED,
                    message=LedgerError.GOAL_ALREADY_COMPLETED,
                    resource_type="FinancialGoal",
                    conflicting_field="is_completed",
                )
            )

        # Step 4: Accumulate (checked)
        now = self._clock.now()
        try:
            completed_now = goal.add_progress(cmd.amount_to_add, now)
        except FixedPointOverflowError as e:
            return Failure(
                error=integrity_failure(
                    e,
                    resource_id=goal.address.value,
                    overflow_message=LedgerError.GOAL_PROGRESS_OVERFLOW,
                )
            )
        portfolio.touch(now)

        # Step 5: Persist both records together
        self._ledger_repo.save_all(updated=[goal, portfolio])

        self._event_bus.publish(
            GoalProgressUpdated(
                portfolio_address=portfolio.address.value,
                goal_address=goal.address.value,
                amount_added=cmd.amount_to_add,
                current_amount=goal.current_amount,
                target_amount=goal.target_amount,
                is_completed=goal.is_completed,
            )
        )
        if completed_now:
            self._event_bus.publish(
                GoalCompleted(
                    portfolio_address=portfolio.address.value,
                    goal_address=goal.address.value,
                    name=goal.name,
                    current_amount=goal.current_amount,
                    target_amount=goal.target_amount,
                )
            )

        return Success(value=goal)
