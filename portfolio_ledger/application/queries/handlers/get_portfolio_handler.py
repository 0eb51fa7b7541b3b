"""GetPortfolio query handler.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from portfolio_ledger.application.dtos.ledger_dtos import PortfolioSummary
from portfolio_ledger.application.queries.ledger_queries import GetPortfolio
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.errors import DomainError
from portfolio_ledger.core.result import Failure, Result, Success


class GetPortfolioHandler:
    """Handler for GetPortfolio query.

    Dependencies (injected via constructor):
        - PortfolioGuard: For address/ownership checks and lookup
    """

    def __init__(self, guard: PortfolioGuard) -> None:
        """Initialize handler with dependencies.

        Args:
            guard: Portfolio guard service.
        """
        self._guard = guard

    def handle(self, query: GetPortfolio) -> Result[PortfolioSummary, DomainError]:
        """Handle GetPortfolio query.

        Args:
            query: GetPortfolio query.

        Returns:
            Success(PortfolioSummary): Current portfolio state.
            Failure(DomainError): InvalidInput, InvalidAddress,
                PortfolioNotFound or Unauthorized.
        """
        result = self._guard.load_owned_portfolio(
            caller=query.caller,
            owner_identity=query.owner_identity,
            disambiguator=query.disambiguator,
            portfolio_address=query.portfolio_address,
        )
        if isinstance(result, Failure):
            return result

        return Success(value=PortfolioSummary.from_entity(result.value))
