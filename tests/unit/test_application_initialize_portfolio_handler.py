"""Unit tests for InitializePortfolioHandler.

Uses mocked repository and event bus for isolation, the real guard and
SHA-256 deriver, and a fixed clock.
"""

from unittest.mock import MagicMock

import pytest

from portfolio_ledger.application.commands import InitializePortfolio
from portfolio_ledger.application.commands.handlers import (
    InitializePortfolioHandler,
)
from portfolio_ledger.application.services import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.result import Failure, Success
from portfolio_ledger.domain.events import (
    LedgerOperationRejected,
    PortfolioInitialized,
)
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
    portfolio_address_for,
)


def create_handler() -> tuple[InitializePortfolioHandler, MagicMock, MagicMock]:
    """Create handler with mocked dependencies."""
    repo = MagicMock(spec=LedgerRepository)
    repo.exists.return_value = False
    event_bus = MagicMock(spec=EventBusProtocol)
    guard = PortfolioGuard(repo, Sha256AddressDeriver(), PORTFOLIO_DOMAIN)

    handler = InitializePortfolioHandler(
        ledger_repo=repo,
        guard=guard,
        event_bus=event_bus,
        clock=FixedClock(),
    )
    return handler, repo, event_bus


def create_command(**overrides) -> InitializePortfolio:
    params = {
        "caller": OWNER,
        "owner_identity": OWNER,
        "disambiguator": DISAMBIGUATOR,
        "portfolio_address": portfolio_address_for().value,
    } | overrides
    return InitializePortfolio(**params)


@pytest.mark.unit
class TestInitializePortfolioSuccess:
    """Test successful initialization."""

    def test_creates_empty_portfolio(self):
        # Arrange
        handler, repo, event_bus = create_handler()

        # Act
        result = handler.handle(create_command())

        # Assert
        assert isinstance(result, Success)
        portfolio = result.value
        assert portfolio.owner == OWNER
        assert portfolio.disambiguator == DISAMBIGUATOR
        assert portfolio.total_assets == 0
        assert portfolio.total_value_usd == 0
        assert portfolio.created_at == portfolio.updated_at == BASE_TIME
        repo.save_all.assert_called_once_with(created=[portfolio])

    def test_publishes_portfolio_initialized(self):
        handler, _, event_bus = create_handler()

        handler.handle(create_command())

        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, PortfolioInitialized)
        assert event.portfolio_address == portfolio_address_for().value
        assert event.owner == OWNER


@pytest.mark.unit
class TestInitializePortfolioFailures:
    """Test rejected initializations write nothing."""

    def test_caller_must_be_owner(self):
        # Arrange
        handler, repo, event_bus = create_handler()

        # Act
        result = handler.handle(create_command(caller=OTHER_OWNER))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHORIZED
        repo.save_all.assert_not_called()
        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, LedgerOperationRejected)
        assert event.operation == "InitializePortfolio"
        assert event.caller == OTHER_OWNER
        assert event.error_code == "unauthorized"

    def test_wrong_address_rejected(self):
        handler, repo, _ = create_handler()
        command = create_command(
            portfolio_address=portfolio_address_for(disambiguator=254).value
        )

        result = handler.handle(command)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ADDRESS
        repo.exists.assert_not_called()
        repo.save_all.assert_not_called()

    def test_existing_portfolio_conflicts(self):
        handler, repo, _ = create_handler()
        repo.exists.return_value = True

        result = handler.handle(create_command())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PORTFOLIO_ALREADY_EXISTS
        repo.save_all.assert_not_called()

    def test_owner_identity_too_long(self):
        owner = "o" * 65
        handler, repo, _ = create_handler()

        result = handler.handle(
            create_command(caller=owner, owner_identity=owner)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_INPUT
        repo.save_all.assert_not_called()

    def test_same_owner_different_disambiguator_is_new_address(self):
        handler, repo, _ = create_handler()
        address = portfolio_address_for(disambiguator=254)

        result = handler.handle(
            create_command(disambiguator=254, portfolio_address=address.value)
        )

        assert isinstance(result, Success)
        assert result.value.address == address
        repo.exists.assert_called_once_with(address)
