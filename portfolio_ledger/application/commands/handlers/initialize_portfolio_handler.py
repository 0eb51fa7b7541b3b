"""InitializePortfolio command handler.

Creates the per-owner portfolio at its derived address with zero totals.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, events)
- Uses Result types for error handling
- Publishes PortfolioInitialized on success, LedgerOperationRejected on failure
"""

from portfolio_ledger.application.commands.ledger_commands import (
    InitializePortfolio,
)
from portfolio_ledger.application.services.ledger_failures import (
    field_failure,
    rejection_event,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import AuthorizationError, ConflictError, DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import Portfolio
from portfolio_ledger.domain.errors import LedgerError
from portfolio_ledger.domain.events.ledger_events import PortfolioInitialized
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import InvalidFieldError


class InitializePortfolioHandler:
    """Handler for InitializePortfolio command.

    Dependencies (injected via constructor):
        - LedgerRepository: For existence check and persistence
        - PortfolioGuard: For address validation
        - EventBusProtocol: For domain events
        - ClockProtocol: For timestamps
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        guard: PortfolioGuard,
        event_bus: EventBusProtocol,
        clock: ClockProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            ledger_repo: Ledger record repository.
            guard: Portfolio guard service.
            event_bus: Event bus for publishing domain events.
            clock: Time source.
        """
        self._ledger_repo = ledger_repo
        self._guard = guard
        self._event_bus = event_bus
        self._clock = clock

    def handle(self, cmd: InitializePortfolio) -> Result[Portfolio, DomainError]:
        """Handle InitializePortfolio command.

        Args:
            cmd: InitializePortfolio command.

        Returns:
            Success(Portfolio): Portfolio created with zero totals.
            Failure(DomainError): Unauthorized, InvalidInput, InvalidAddress
                or AlreadyExists. Nothing is written.

        Side Effects:
            - Persists one new portfolio record (on success)
            - Publishes PortfolioInitialized or LedgerOperationRejected
        """
        result = self._initialize(cmd)

        match result:
            case Success(value=portfolio):
                self._event_bus.publish(
                    PortfolioInitialized(
                        portfolio_address=portfolio.address.value,
                        owner=portfolio.owner,
                        disambiguator=portfolio.disambiguator,
                    )
                )
            case Failure(error=error):
                self._event_bus.publish(
                    rejection_event(
                        operation="InitializePortfolio",
                        caller=cmd.caller,
                        portfolio_address=cmd.portfolio_address,
                        error=error,
                    )
                )

        return result

    def _initialize(self, cmd: InitializePortfolio) -> Result[Portfolio, DomainError]:
        # Step 1: Only the owner may create their portfolio
        if cmd.caller != cmd.owner_identity:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.UNAUTHORIZED,
                    message=LedgerError.NOT_PORTFOLIO_OWNER,
                    required_permission="portfolio_owner",
                )
            )

        # Step 2: Validate inputs and recompute the address
        address_result = self._guard.resolve_address(
            owner_identity=cmd.owner_identity,
            disambiguator=cmd.disambiguator,
            portfolio_address=cmd.portfolio_address,
        )
        if isinstance(address_result, Failure):
            return address_result
        address = address_result.value

        # Step 3: One portfolio per address
        if self._ledger_repo.exists(address):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PORTFOLIO_ALREADY_EXISTS,
                    message=LedgerError.PORTFOLIO_ALREADY_EXISTS,
                    resource_type="Portfolio",
                    conflicting_field="address",
                )
            )

        # Step 4: Create and persist
        now = self._clock.now()
        try:
            portfolio = Portfolio(
                address=address,
                owner=cmd.owner_identity,
                disambiguator=cmd.disambiguator,
                created_at=now,
                updated_at=now,
            )
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        self._ledger_repo.save_all(created=[portfolio])

        return Success(value=portfolio)
