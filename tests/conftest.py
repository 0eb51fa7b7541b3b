"""Pytest configuration and shared builders.

This configuration provides:
1. Marker registration (unit, integration)
2. A fixed, manually advanced clock
3. Entity builders with valid defaults
4. An isolated in-memory SQLite store per test
"""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from portfolio_ledger.core.constants import (
    ASSET_ADDRESS_DOMAIN,
    GOAL_ADDRESS_DOMAIN,
    TRANSACTION_ADDRESS_DOMAIN,
)
from portfolio_ledger.domain.entities import (
    CryptoAsset,
    FinancialGoal,
    Portfolio,
    TransactionRecord,
)
from portfolio_ledger.domain.value_objects.address import Address
from portfolio_ledger.infrastructure.addressing.sha256_address_deriver import (
    Sha256AddressDeriver,
)
from portfolio_ledger.infrastructure.persistence.database import Database
from portfolio_ledger.infrastructure.persistence.repositories import (
    SqlAlchemyLedgerRepository,
)

OWNER = "alice"
OTHER_OWNER = "mallory"
DISAMBIGUATOR = 255
PORTFOLIO_DOMAIN = "portfolio"
BASE_TIME = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)

_deriver = Sha256AddressDeriver()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# =============================================================================
# Clock
# =============================================================================


class FixedClock:
    """Clock returning a fixed instant until advanced."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> datetime:
        """Move the clock forward (timedelta keyword arguments)."""
        self.current = self.current + timedelta(**delta)
        return self.current


# =============================================================================
# Builders
# =============================================================================


def portfolio_address_for(
    owner: str = OWNER, disambiguator: int = DISAMBIGUATOR
) -> Address:
    """Derive the portfolio address the default guard expects."""
    return _deriver.derive(PORTFOLIO_DOMAIN, owner, disambiguator)


def create_test_portfolio(
    owner: str = OWNER,
    disambiguator: int = DISAMBIGUATOR,
    total_assets: int = 0,
    total_value_usd: int = 0,
    now: datetime = BASE_TIME,
) -> Portfolio:
    """Create a Portfolio at its derived address."""
    return Portfolio(
        address=portfolio_address_for(owner, disambiguator),
        owner=owner,
        disambiguator=disambiguator,
        created_at=now,
        updated_at=now,
        total_assets=total_assets,
        total_value_usd=total_value_usd,
    )


def create_test_asset(
    portfolio: Portfolio,
    symbol: str = "BTC",
    amount: int = 1_000_000,
    price_usd: int = 50_000_000_000,
    network: str = "bitcoin",
    record_key: UUID | None = None,
    now: datetime = BASE_TIME,
) -> CryptoAsset:
    """Create a CryptoAsset referencing portfolio."""
    return CryptoAsset(
        address=_deriver.derive(
            ASSET_ADDRESS_DOMAIN, portfolio.address.value, record_key or uuid7()
        ),
        portfolio_address=portfolio.address,
        symbol=symbol,
        amount=amount,
        price_usd=price_usd,
        network=network,
        last_updated=now,
    )


def create_test_transaction(
    portfolio: Portfolio,
    transaction_id: str = "tx-001",
    amount: int = -25_000_000,
    transaction_type: str = "expense",
    category: str = "food",
    description: str = "Groceries",
    now: datetime = BASE_TIME,
) -> TransactionRecord:
    """Create a TransactionRecord referencing portfolio."""
    return TransactionRecord(
        address=_deriver.derive(
            TRANSACTION_ADDRESS_DOMAIN, portfolio.address.value, uuid7()
        ),
        portfolio_address=portfolio.address,
        transaction_id=transaction_id,
        amount=amount,
        transaction_type=transaction_type,
        category=category,
        description=description,
        timestamp=now,
    )


def create_test_goal(
    portfolio: Portfolio,
    name: str = "Emergency fund",
    target_amount: int = 1_000_000,
    current_amount: int = 0,
    is_completed: bool = False,
    category: str = "savings",
    now: datetime = BASE_TIME,
) -> FinancialGoal:
    """Create a FinancialGoal referencing portfolio."""
    return FinancialGoal(
        address=_deriver.derive(GOAL_ADDRESS_DOMAIN, portfolio.address.value, uuid7()),
        portfolio_address=portfolio.address,
        name=name,
        target_amount=target_amount,
        target_date=now + timedelta(days=365),
        category=category,
        created_at=now,
        updated_at=now,
        current_amount=current_amount,
        is_completed=is_completed,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FixedClock:
    """Fresh fixed clock per test."""
    return FixedClock()


@pytest.fixture
def deriver() -> Sha256AddressDeriver:
    """SHA-256 address deriver."""
    return Sha256AddressDeriver()


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """Isolated in-memory SQLite database with tables created."""
    db = Database("sqlite+pysqlite:///:memory:")
    db.create_all()
    yield db
    db.drop_all()
    db.close()


@pytest.fixture
def ledger_repository(database: Database) -> SqlAlchemyLedgerRepository:
    """Ledger repository bound to the isolated database."""
    return SqlAlchemyLedgerRepository(database)
