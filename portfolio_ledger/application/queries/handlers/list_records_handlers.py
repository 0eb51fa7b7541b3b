"""List query handlers for a portfolio's dependent records.

Handles requests to list assets, transaction records and goals. Each list
is in creation order.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Returns Result[list[Entity], DomainError]
- NO domain events (queries are side-effect free)
- Owner-scoped via PortfolioGuard
"""

from portfolio_ledger.application.queries.ledger_queries import (
    ListAssets,
    ListGoals,
    ListTransactions,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.errors import DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import (
    CryptoAsset,
    FinancialGoal,
    TransactionRecord,
)
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository


class ListAssetsHandler:
    """Handler for ListAssets query.

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

    def handle(self, query: ListAssets) -> Result[list[CryptoAsset], DomainError]:
        """Handle ListAssets query.

        Args:
            query: ListAssets query.

        Returns:
            Success(list[CryptoAsset]): Assets (empty list if none).
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

        return Success(value=self._ledger_repo.list_assets(result.value.address))


class ListTransactionsHandler:
    """Handler for ListTransactions query.

    Dependencies (injected via constructor):
        - LedgerRepository: For record retrieval
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
        self, query: ListTransactions
    ) -> Result[list[TransactionRecord], DomainError]:
        """Handle ListTransactions query.

        Args:
            query: ListTransactions query.

        Returns:
            Success(list[TransactionRecord]): Records (empty list if none).
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

        return Success(
            value=self._ledger_repo.list_transactions(result.value.address)
        )


class ListGoalsHandler:
    """Handler for ListGoals query.

    Dependencies (injected via constructor):
        - LedgerRepository: For goal retrieval
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

    def handle(self, query: ListGoals) -> Result[list[FinancialGoal], DomainError]:
        """Handle ListGoals query.

        Args:
            query: ListGoals query.

        Returns:
            Success(list[FinancialGoal]): Goals (empty list if none).
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

        return Success(value=self._ledger_repo.list_goals(result.value.address))
