"""End-to-end ledger workflows against a real SQLite store.

Wires the real handlers, guard, repository and event bus together (the
same graph the container builds) with a fixed clock.

Tests cover:
- Portfolio lifecycle: initialize, add, update, goals, transactions
- Aggregate invariant holds after every operation
- Rejected operations leave every record unchanged
- Completed-goal policy
"""

from dataclasses import dataclass
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from portfolio_ledger.application.commands import (
    AddAsset,
    CreateGoal,
    InitializePortfolio,
    RecordTransaction,
    UpdateAsset,
    UpdateGoalProgress,
)
from portfolio_ledger.application.commands.handlers import (
    AddAssetHandler,
    CreateGoalHandler,
    InitializePortfolioHandler,
    RecordTransactionHandler,
    UpdateAssetHandler,
    UpdateGoalProgressHandler,
)
from portfolio_ledger.application.queries import (
    GetPortfolio,
    ListAssets,
    ListTransactions,
    ReconcilePortfolio,
)
from portfolio_ledger.application.queries.handlers import (
    GetPortfolioHandler,
    ListAssetsHandler,
    ListTransactionsHandler,
    ReconcilePortfolioHandler,
)
from portfolio_ledger.application.services import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.result import Failure, Success
from portfolio_ledger.domain.events import (
    GoalCompleted,
    LedgerOperationRejected,
)
from portfolio_ledger.infrastructure.events import InMemoryEventBus
from tests.conftest import (
    BASE_TIME,
    DISAMBIGUATOR,
    OTHER_OWNER,
    OWNER,
    PORTFOLIO_DOMAIN,
    FixedClock,
    portfolio_address_for,
)

PORTFOLIO_ADDRESS = portfolio_address_for().value


@dataclass
class Ledger:
    """Handlers sharing one store, clock and event bus."""

    repo: object
    clock: FixedClock
    events: list
    initialize: InitializePortfolioHandler
    add_asset: AddAssetHandler
    update_asset: UpdateAssetHandler
    record_transaction: RecordTransactionHandler
    create_goal: CreateGoalHandler
    update_goal_progress: UpdateGoalProgressHandler
    get_portfolio: GetPortfolioHandler
    list_assets: ListAssetsHandler
    list_transactions: ListTransactionsHandler
    reconcile: ReconcilePortfolioHandler


def build_ledger(repo, deriver, *, strict_goals: bool = False) -> Ledger:
    clock = FixedClock()
    events: list = []
    event_bus = InMemoryEventBus(logger=MagicMock())
    for event_type in (GoalCompleted, LedgerOperationRejected):
        event_bus.subscribe(event_type, events.append)
    guard = PortfolioGuard(repo, deriver, PORTFOLIO_DOMAIN)

    return Ledger(
        repo=repo,
        clock=clock,
        events=events,
        initialize=InitializePortfolioHandler(repo, guard, event_bus, clock),
        add_asset=AddAssetHandler(repo, guard, event_bus, clock),
        update_asset=UpdateAssetHandler(repo, guard, event_bus, clock),
        record_transaction=RecordTransactionHandler(repo, guard, event_bus, clock),
        create_goal=CreateGoalHandler(repo, guard, event_bus, clock),
        update_goal_progress=UpdateGoalProgressHandler(
            repo, guard, event_bus, clock, reject_progress_on_completed=strict_goals
        ),
        get_portfolio=GetPortfolioHandler(guard),
        list_assets=ListAssetsHandler(repo, guard),
        list_transactions=ListTransactionsHandler(repo, guard),
        reconcile=ReconcilePortfolioHandler(repo, guard),
    )


def owner_fields(caller: str = OWNER) -> dict:
    return {
        "caller": caller,
        "owner_identity": OWNER,
        "disambiguator": DISAMBIGUATOR,
        "portfolio_address": PORTFOLIO_ADDRESS,
    }


def initialize(ledger: Ledger):
    return ledger.initialize.handle(InitializePortfolio(**owner_fields()))


def add_btc(ledger: Ledger, caller: str = OWNER, **overrides):
    params = owner_fields(caller) | {
        "symbol": "BTC",
        "amount": 1_000_000,
        "price_usd": 50_000_000_000,
        "network": "bitcoin",
    } | overrides
    return ledger.add_asset.handle(AddAsset(**params))


def create_goal(ledger: Ledger, target_amount: int = 1_000_000):
    return ledger.create_goal.handle(
        CreateGoal(
            **owner_fields(),
            name="Emergency fund",
            target_amount=target_amount,
            target_date=BASE_TIME + timedelta(days=180),
            category="savings",
        )
    )


def progress(ledger: Ledger, goal_address: str, amount: int, caller: str = OWNER):
    return ledger.update_goal_progress.handle(
        UpdateGoalProgress(
            **owner_fields(caller), goal_address=goal_address, amount_to_add=amount
        )
    )


def stored_portfolio(ledger: Ledger):
    return ledger.get_portfolio.handle(GetPortfolio(**owner_fields())).value


def assert_aggregate_consistent(ledger: Ledger) -> None:
    report = ledger.reconcile.handle(ReconcilePortfolio(**owner_fields())).value
    assert report.is_consistent, report


@pytest.fixture
def ledger(ledger_repository, deriver) -> Ledger:
    return build_ledger(ledger_repository, deriver)


# =============================================================================
# Lifecycle
# =============================================================================


@pytest.mark.integration
class TestPortfolioLifecycle:
    """Test the main ledger workflow step by step."""

    def test_initialize_creates_empty_portfolio(self, ledger):
        result = initialize(ledger)

        assert isinstance(result, Success)
        summary = stored_portfolio(ledger)
        assert summary.total_assets == 0
        assert summary.total_value_usd == 0
        assert summary.created_at == BASE_TIME

    def test_add_asset_updates_aggregate(self, ledger):
        initialize(ledger)

        result = add_btc(ledger)

        assert isinstance(result, Success)
        summary = stored_portfolio(ledger)
        assert summary.total_value_usd == 50_000_000_000
        assert summary.total_assets == 1
        assert summary.total_value_usd_display == "50000.000000"
        assert_aggregate_consistent(ledger)

    def test_update_asset_rebalances_aggregate(self, ledger):
        # Arrange
        initialize(ledger)
        asset = add_btc(ledger).value
        ledger.clock.advance(minutes=10)

        # Act
        result = ledger.update_asset.handle(
            UpdateAsset(
                **owner_fields(),
                asset_address=asset.address.value,
                new_amount=2_000_000,
            )
        )

        # Assert
        assert isinstance(result, Success)
        summary = stored_portfolio(ledger)
        assert summary.total_value_usd == 100_000_000_000
        assert summary.updated_at == BASE_TIME + timedelta(minutes=10)
        stored_asset = ledger.repo.find_asset(asset.address)
        assert stored_asset.amount == 2_000_000
        assert stored_asset.last_updated == BASE_TIME + timedelta(minutes=10)
        assert_aggregate_consistent(ledger)

    def test_goal_completes_when_target_reached(self, ledger):
        initialize(ledger)
        goal = create_goal(ledger).value

        result = progress(ledger, goal.address.value, 1_000_000)

        assert isinstance(result, Success)
        stored = ledger.repo.find_goal(goal.address)
        assert stored.current_amount == 1_000_000
        assert stored.is_completed is True
        assert [type(e) for e in ledger.events] == [GoalCompleted]

    def test_overshoot_accepted_on_completed_goal(self, ledger):
        initialize(ledger)
        goal = create_goal(ledger).value
        progress(ledger, goal.address.value, 1_000_000)

        result = progress(ledger, goal.address.value, 1)

        assert isinstance(result, Success)
        stored = ledger.repo.find_goal(goal.address)
        assert stored.current_amount == 1_000_001
        assert stored.is_completed is True
        assert len(ledger.events) == 1

    def test_strict_policy_rejects_progress_on_completed_goal(
        self, ledger_repository, deriver
    ):
        strict = build_ledger(ledger_repository, deriver, strict_goals=True)
        initialize(strict)
        goal = create_goal(strict).value
        progress(strict, goal.address.value, 1_000_000)

        result = progress(strict, goal.address.value, 1)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.GOAL_ALREADY_COMPLETED
        assert strict.repo.find_goal(goal.address).current_amount == 1_000_000

    def test_transactions_do_not_touch_totals(self, ledger):
        initialize(ledger)
        add_btc(ledger)
        ledger.clock.advance(hours=1)

        for index, amount in enumerate([-25_000_000, 100_000_000, -1]):
            ledger.record_transaction.handle(
                RecordTransaction(
                    **owner_fields(),
                    transaction_id=f"tx-{index}",
                    amount=amount,
                    transaction_type="expense" if amount < 0 else "income",
                )
            )

        summary = stored_portfolio(ledger)
        assert summary.total_value_usd == 50_000_000_000
        assert summary.updated_at == BASE_TIME + timedelta(hours=1)
        records = ledger.list_transactions.handle(
            ListTransactions(**owner_fields())
        ).value
        assert [r.transaction_id for r in records] == ["tx-0", "tx-1", "tx-2"]

    def test_many_assets_keep_aggregate_consistent(self, ledger):
        initialize(ledger)
        holdings = [
            ("BTC", 1_500_000, 50_000_000_000),
            ("ETH", 3_333_333, 3_000_123_456),
            ("SOL", 1, 999_999),
        ]
        for symbol, amount, price in holdings:
            add_btc(ledger, symbol=symbol, amount=amount, price_usd=price)

        assets = ledger.list_assets.handle(ListAssets(**owner_fields())).value

        assert [a.symbol for a in assets] == ["BTC", "ETH", "SOL"]
        assert stored_portfolio(ledger).total_assets == 3
        assert_aggregate_consistent(ledger)


# =============================================================================
# Rejections leave state unchanged
# =============================================================================


@pytest.mark.integration
class TestRejectedOperations:
    """Test that failures never write."""

    def test_second_initialize_conflicts(self, ledger):
        initialize(ledger)

        result = initialize(ledger)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PORTFOLIO_ALREADY_EXISTS

    def test_non_owner_cannot_add_asset(self, ledger):
        initialize(ledger)

        result = add_btc(ledger, caller=OTHER_OWNER)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHORIZED
        assert stored_portfolio(ledger).total_assets == 0
        assert isinstance(ledger.events[-1], LedgerOperationRejected)

    def test_add_asset_before_initialize(self, ledger):
        result = add_btc(ledger)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PORTFOLIO_NOT_FOUND

    def test_asset_from_other_portfolio_not_found(self, ledger, deriver):
        # Arrange: a second portfolio for the same owner
        initialize(ledger)
        other_address = deriver.derive(PORTFOLIO_DOMAIN, OWNER, 7).value
        second = owner_fields() | {
            "disambiguator": 7,
            "portfolio_address": other_address,
        }
        ledger.initialize.handle(InitializePortfolio(**second))
        foreign = ledger.add_asset.handle(
            AddAsset(
                **second,
                symbol="ETH",
                amount=1_000_000,
                price_usd=3_000_000_000,
                network="ethereum",
            )
        ).value

        # Act
        result = ledger.update_asset.handle(
            UpdateAsset(
                **owner_fields(),
                asset_address=foreign.address.value,
                new_amount=5_000_000,
            )
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ASSET_NOT_FOUND
        assert ledger.repo.find_asset(foreign.address).amount == 1_000_000
        assert stored_portfolio(ledger).total_value_usd == 0

    def test_goal_progress_with_asset_address_not_found(self, ledger):
        initialize(ledger)
        asset = add_btc(ledger).value

        result = progress(ledger, asset.address.value, 10)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.GOAL_NOT_FOUND

    def test_oversized_symbol_rejected_not_truncated(self, ledger):
        initialize(ledger)

        result = add_btc(ledger, symbol="X" * 33)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_INPUT
        assert result.error.field == "symbol"
        assert ledger.list_assets.handle(ListAssets(**owner_fields())).value == []

    def test_blank_symbol_and_network_accepted_within_bounds(self, ledger):
        initialize(ledger)

        result = add_btc(ledger, symbol="", network=" ")

        assert isinstance(result, Success)
        assets = ledger.list_assets.handle(ListAssets(**owner_fields())).value
        assert [(a.symbol, a.network) for a in assets] == [("", " ")]
