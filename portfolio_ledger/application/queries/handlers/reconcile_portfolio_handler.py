"""ReconcilePortfolio query handler.

Recomputes a portfolio's aggregates from its asset records and reports
whether the stored totals still agree. Read-only: a drift is reported, never
repaired.
"""

from portfolio_ledger.application.dtos.ledger_dtos import ReconciliationReport
from portfolio_ledger.application.queries.ledger_queries import ReconcilePortfolio
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.errors import DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository


class ReconcilePortfolioHandler:
    """Handler for ReconcilePortfolio query.

    Dependencies (injected via constructor):
        - LedgerRepository: For asset retrieval
        - PortfolioGuard: For address/ownership checks
    """

    def __init__(self, ledger_repo: LedgerRepository, guard: PortfolioGuard) -> None:
        """Initialize handler with dependencies.

        Args:
            ledger_repo: Ledger record repository.
            guard: Portfolio guard service.
        """
        self._ledger_repo = ledger_repo
        self._guard = guard

    def handle(
        self, query: ReconcilePortfolio
    ) -> Result[ReconciliationReport, DomainError]:
        """Handle ReconcilePortfolio query.

        Args:
            query: ReconcilePortfolio query.

        Returns:
            Success(ReconciliationReport): Recorded vs computed aggregates.
            Failure(DomainError): Portfolio could not be resolved or is not
                owned by the caller.
        """
        result = self._guard.load_owned_portfolio(
            caller=query.caller,
            owner_identity=query.owner_identity,
            disambiguator=query.disambiguator,
            portfolio_address=query.portfolio_address,
        )
        if isinstance(result, Failure):
            return result
        portfolio = result.value

        assets = self._ledger_repo.list_assets(portfolio.address)

        return Success(
            value=ReconciliationReport(
                portfolio_address=portfolio.address.value,
                recorded_total_value_usd=portfolio.total_value_usd,
                computed_total_value_usd=sum(asset.value_usd for asset in assets),
                recorded_total_assets=portfolio.total_assets,
                asset_count=len(assets),
            )
        )
