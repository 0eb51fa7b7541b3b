"""Unit tests for PortfolioGuard service.

Tests the check order every ledger operation relies on:
input shape → address → existence → ownership → back-reference.
Uses a mocked repository and the real SHA-256 deriver.
"""

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from portfolio_ledger.application.services import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import AuthorizationError, NotFoundError
from portfolio_ledger.core.result import Failure, Success
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.infrastructure.addressing import Sha256AddressDeriver
from tests.conftest import (
    DISAMBIGUATOR,
    OTHER_OWNER,
    OWNER,
    PORTFOLIO_DOMAIN,
    create_test_asset,
    create_test_goal,
    create_test_portfolio,
    portfolio_address_for,
)


def create_guard() -> tuple[PortfolioGuard, MagicMock]:
    """Create guard with mocked repository."""
    repo = MagicMock(spec=LedgerRepository)
    guard = PortfolioGuard(
        ledger_repo=repo,
        address_deriver=Sha256AddressDeriver(),
        portfolio_domain=PORTFOLIO_DOMAIN,
    )
    return guard, repo


def load(guard: PortfolioGuard, **overrides):
    params = {
        "caller": OWNER,
        "owner_identity": OWNER,
        "disambiguator": DISAMBIGUATOR,
        "portfolio_address": portfolio_address_for().value,
    } | overrides
    return guard.load_owned_portfolio(**params)


@pytest.mark.unit
class TestLoadOwnedPortfolio:
    """Test portfolio resolution and authorization."""

    def test_owner_gets_portfolio(self):
        # Arrange
        guard, repo = create_guard()
        portfolio = create_test_portfolio()
        repo.find_portfolio.return_value = portfolio

        # Act
        result = load(guard)

        # Assert
        assert isinstance(result, Success)
        assert result.value is portfolio
        repo.find_portfolio.assert_called_once_with(portfolio.address)

    def test_blank_owner_identity_is_invalid_input(self):
        guard, repo = create_guard()

        result = load(guard, owner_identity="")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_INPUT
        repo.find_portfolio.assert_not_called()

    def test_disambiguator_out_of_range_is_invalid_input(self):
        guard, _ = create_guard()

        result = load(guard, disambiguator=300)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_INPUT
        assert result.error.field == "disambiguator"

    def test_mismatched_address_checked_before_lookup(self):
        guard, repo = create_guard()

        result = load(guard, disambiguator=254)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ADDRESS
        repo.find_portfolio.assert_not_called()

    def test_missing_portfolio(self):
        guard, repo = create_guard()
        repo.find_portfolio.return_value = None

        result = load(guard)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PORTFOLIO_NOT_FOUND
        assert result.error.resource_id == portfolio_address_for().value

    def test_non_owner_is_unauthorized(self):
        guard, repo = create_guard()
        repo.find_portfolio.return_value = create_test_portfolio()

        result = load(guard, caller=OTHER_OWNER)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.UNAUTHORIZED

    def test_missing_portfolio_reported_before_ownership(self):
        guard, repo = create_guard()
        repo.find_portfolio.return_value = None

        result = load(guard, caller=OTHER_OWNER)

        assert result.error.code == ErrorCode.PORTFOLIO_NOT_FOUND


@pytest.mark.unit
class TestDependentRecords:
    """Test back-reference checks for assets and goals."""

    def test_asset_of_portfolio_loaded(self):
        guard, repo = create_guard()
        portfolio = create_test_portfolio()
        asset = create_test_asset(portfolio)
        repo.find_asset.return_value = asset

        result = guard.load_asset(portfolio, asset.address.value)

        assert isinstance(result, Success)
        assert result.value is asset

    def test_asset_of_other_portfolio_not_found(self):
        guard, repo = create_guard()
        portfolio = create_test_portfolio()
        foreign = create_test_asset(create_test_portfolio(owner=OTHER_OWNER))
        repo.find_asset.return_value = foreign

        result = guard.load_asset(portfolio, foreign.address.value)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ASSET_NOT_FOUND

    def test_malformed_asset_address_not_found(self):
        guard, repo = create_guard()

        result = guard.load_asset(create_test_portfolio(), "zz")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ASSET_NOT_FOUND
        repo.find_asset.assert_not_called()

    def test_missing_goal_not_found(self):
        guard, repo = create_guard()
        repo.find_goal.return_value = None

        result = guard.load_goal(create_test_portfolio(), "ab" * 32)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.GOAL_NOT_FOUND
        assert result.error.resource_type == "FinancialGoal"

    def test_goal_of_portfolio_loaded(self):
        guard, repo = create_guard()
        portfolio = create_test_portfolio()
        goal = create_test_goal(portfolio)
        repo.find_goal.return_value = goal

        result = guard.load_goal(portfolio, goal.address.value)

        assert isinstance(result, Success)

    def test_record_address_depends_on_portfolio_and_key(self, deriver):
        guard, _ = create_guard()
        portfolio = create_test_portfolio()
        other = create_test_portfolio(owner=OTHER_OWNER)
        key = UUID(int=1)

        assert guard.record_address("asset", portfolio, key) == deriver.derive(
            "asset", portfolio.address.value, key
        )
        assert guard.record_address("asset", portfolio, key) != (
            guard.record_address("asset", other, key)
        )
