"""Unit tests for RecordTransactionHandler."""

from unittest.mock import MagicMock

import pytest

from portfolio_ledger.application.commands import RecordTransaction
from portfolio_ledger.application.commands.handlers import RecordTransactionHandler
from portfolio_ledger.application.services import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.result import Failure, Success
from portfolio_ledger.domain.events import TransactionRecorded
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.infrastructure.addressing import Sha256AddressDeriver
from tests.conftest import (
    BASE_TIME,
    DISAMBIGUATOR,
    OTHER_OWNER,
    OWNER,
    PORTFOLIO_DOMAIN,
    FixedClock,
    create_test_portfolio,
    portfolio_address_for,
)

LATER = BASE_TIME.replace(minute=30)


def create_handler(portfolio):
    """Create handler with mocked dependencies."""
    repo = MagicMock(spec=LedgerRepository)
    repo.find_portfolio.return_value = portfolio
    event_bus = MagicMock(spec=EventBusProtocol)

    handler = RecordTransactionHandler(
        ledger_repo=repo,
        guard=PortfolioGuard(repo, Sha256AddressDeriver(), PORTFOLIO_DOMAIN),
        event_bus=event_bus,
        clock=FixedClock(LATER),
    )
    return handler, repo, event_bus


def create_command(**overrides) -> RecordTransaction:
    params = {
        "caller": OWNER,
        "owner_identity": OWNER,
        "disambiguator": DISAMBIGUATOR,
        "portfolio_address": portfolio_address_for().value,
        "transaction_id": "tx-001",
        "amount": -25_000_000,
        "transaction_type": "expense",
        "category": "food",
        "description": "Groceries",
    } | overrides
    return RecordTransaction(**params)


@pytest.mark.unit
class TestRecordTransaction:
    """Test appending transaction records."""

    def test_records_and_only_touches_portfolio(self):
        # Arrange
        portfolio = create_test_portfolio(total_assets=2, total_value_usd=99)
        handler, repo, event_bus = create_handler(portfolio)

        # Act
        result = handler.handle(create_command())

        # Assert
        assert isinstance(result, Success)
        record = result.value
        assert record.amount == -25_000_000
        assert record.timestamp == LATER
        assert record.portfolio_address == portfolio.address
        assert portfolio.total_assets == 2
        assert portfolio.total_value_usd == 99
        assert portfolio.updated_at == LATER
        repo.save_all.assert_called_once_with(created=[record], updated=[portfolio])
        assert isinstance(event_bus.publish.call_args[0][0], TransactionRecorded)

    def test_duplicate_transaction_ids_get_distinct_addresses(self):
        handler, _, _ = create_handler(create_test_portfolio())

        first = handler.handle(create_command()).value
        second = handler.handle(create_command()).value

        assert first.transaction_id == second.transaction_id
        assert first.address != second.address

    def test_empty_optional_text_allowed(self):
        handler, _, _ = create_handler(create_test_portfolio())

        result = handler.handle(create_command(category="", description=""))

        assert isinstance(result, Success)

    def test_description_too_long(self):
        portfolio = create_test_portfolio()
        handler, repo, _ = create_handler(portfolio)

        result = handler.handle(create_command(description="d" * 129))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_INPUT
        assert result.error.field == "description"
        assert portfolio.updated_at == BASE_TIME
        repo.save_all.assert_not_called()

    def test_amount_outside_signed_range(self):
        handler, _, _ = create_handler(create_test_portfolio())

        result = handler.handle(create_command(amount=2**63))

        assert result.error.code == ErrorCode.INVALID_INPUT

    def test_non_owner_unauthorized(self):
        handler, repo, _ = create_handler(create_test_portfolio())

        result = handler.handle(create_command(caller=OTHER_OWNER))

        assert result.error.code == ErrorCode.UNAUTHORIZED
        repo.save_all.assert_not_called()
