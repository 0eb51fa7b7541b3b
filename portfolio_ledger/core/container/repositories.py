"""Repository and guard factories.

The ledger repository is application-scoped: it opens its own sessions
from the shared Database, one per read and one transaction per write.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from portfolio_ledger.core.config import settings
from portfolio_ledger.core.container.infrastructure import (
    get_address_deriver,
    get_database,
)

if TYPE_CHECKING:
    from portfolio_ledger.application.services.portfolio_guard import (
        PortfolioGuard,
    )
    from portfolio_ledger.domain.protocols.ledger_repository import (
        LedgerRepository,
    )


@lru_cache()
def get_ledger_repository() -> "LedgerRepository":
    """Get ledger repository singleton (app-scoped).

    Returns:
        SqlAlchemyLedgerRepository bound to get_database().
    """
    from portfolio_ledger.infrastructure.persistence.repositories import (
        SqlAlchemyLedgerRepository,
    )

    return SqlAlchemyLedgerRepository(get_database())


def get_portfolio_guard() -> "PortfolioGuard":
    """Get portfolio guard.

    Returns:
        PortfolioGuard using the configured portfolio address domain.
    """
    from portfolio_ledger.application.services.portfolio_guard import (
        PortfolioGuard,
    )

    return PortfolioGuard(
        ledger_repo=get_ledger_repository(),
        address_deriver=get_address_deriver(),
        portfolio_domain=settings.portfolio_address_domain,
    )
