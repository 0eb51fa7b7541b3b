"""Ledger domain events.

Published after a ledger operation commits (or is rejected). These are
observational: nothing in the ledger reads them back.

Events:
1. PortfolioInitialized - New portfolio created
2. AssetAdded - Crypto asset added, totals increased
3. AssetUpdated - Asset amount/price changed, total value rebalanced
4. TransactionRecorded - Audit entry appended
5. GoalCreated - Savings goal created
6. GoalProgressUpdated - Progress accumulated on a goal
7. GoalCompleted - Goal crossed its target (fires once per goal)
8. LedgerOperationRejected - Operation failed, nothing persisted

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass

from portfolio_ledger.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class PortfolioInitialized(DomainEvent):
    """Emitted after a portfolio is created.

    Attributes:
        portfolio_address: Address of the new portfolio.
        owner: Owner identity.
        disambiguator: Disambiguator used in the derivation.
    """

    portfolio_address: str
    owner: str
    disambiguator: int


@dataclass(frozen=True, kw_only=True, slots=True)
class AssetAdded(DomainEvent):
    """Emitted after an asset is added to a portfolio.

    Attributes:
        portfolio_address: Owning portfolio.
        asset_address: New asset.
        symbol: Asset symbol.
        value_usd: Scaled value contributed by the asset.
        total_value_usd: Portfolio total after the addition.
        total_assets: Portfolio asset count after the addition.
    """

    portfolio_address: str
    asset_address: str
    symbol: str
    value_usd: int
    total_value_usd: int
    total_assets: int


@dataclass(frozen=True, kw_only=True, slots=True)
class AssetUpdated(DomainEvent):
    """Emitted after an asset's amount and/or price changes.

    Attributes:
        portfolio_address: Owning portfolio.
        asset_address: Updated asset.
        symbol: Asset symbol.
        previous_value_usd: Asset value before the update.
        new_value_usd: Asset value after the update.
        total_value_usd: Portfolio total after rebalancing.
    """

    portfolio_address: str
    asset_address: str
    symbol: str
    previous_value_usd: int
    new_value_usd: int
    total_value_usd: int


@dataclass(frozen=True, kw_only=True, slots=True)
class TransactionRecorded(DomainEvent):
    """Emitted after a transaction record is appended.

    Attributes:
        portfolio_address: Owning portfolio.
        record_address: New record.
        transaction_id: Caller-supplied identifier.
        amount: Signed scaled amount.
        transaction_type: Type label.
    """

    portfolio_address: str
    record_address: str
    transaction_id: str
    amount: int
    transaction_type: str


@dataclass(frozen=True, kw_only=True, slots=True)
class GoalCreated(DomainEvent):
    """Emitted after a goal is created.

    Attributes:
        portfolio_address: Owning portfolio.
        goal_address: New goal.
        name: Goal name.
        target_amount: Scaled target.
    """

    portfolio_address: str
    goal_address: str
    name: str
    target_amount: int


@dataclass(frozen=True, kw_only=True, slots=True)
class GoalProgressUpdated(DomainEvent):
    """Emitted after progress is added to a goal.

    Attributes:
        portfolio_address: Owning portfolio.
        goal_address: Updated goal.
        amount_added: Scaled amount added by this operation.
        current_amount: Progress after the update.
        target_amount: Goal target.
        is_completed: Completion flag after the update.
    """

    portfolio_address: str
    goal_address: str
    amount_added: int
    current_amount: int
    target_amount: int
    is_completed: bool


@dataclass(frozen=True, kw_only=True, slots=True)
class GoalCompleted(DomainEvent):
    """Emitted once, when a goal transitions to COMPLETED.

    Attributes:
        portfolio_address: Owning portfolio.
        goal_address: Completed goal.
        name: Goal name.
        current_amount: Progress at completion.
        target_amount: Goal target.
    """

    portfolio_address: str
    goal_address: str
    name: str
    current_amount: int
    target_amount: int


@dataclass(frozen=True, kw_only=True, slots=True)
class LedgerOperationRejected(DomainEvent):
    """Emitted when an operation fails; no record was changed.

    Attributes:
        operation: Command name (e.g. "AddAsset").
        caller: Identity that invoked the operation.
        error_code: Machine-readable error code.
        reason: Human-readable failure message.
        portfolio_address: Claimed portfolio address, if any.
    """

    operation: str
    caller: str
    error_code: str
    reason: str
    portfolio_address: str | None = None
