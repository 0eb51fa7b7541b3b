"""Ledger commands (CQRS write operations).

Commands represent an owner's intent to change ledger state.
All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)

Addressing:
    Every command names its portfolio three ways: the owner identity, the
    disambiguator, and the claimed portfolio address. Handlers recompute the
    address and reject mismatches before reading anything.

    `caller` is the identity that signed the request. It is verified
    upstream; the ledger only compares it with the portfolio owner.

Amounts:
    All quantities are integers scaled by 1,000,000 (six decimal places).
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class InitializePortfolio:
    """Create the portfolio for an owner.

    Attributes:
        caller: Verified identity making the request (must equal owner).
        owner_identity: Owner of the new portfolio.
        disambiguator: Derivation disambiguator (0-255).
        portfolio_address: Claimed address of the new portfolio.

    Example:
        >>> command = InitializePortfolio(
        ...     caller="alice",
        ...     owner_identity="alice",
        ...     disambiguator=255,
        ...     portfolio_address=deriver.derive("portfolio", "alice", 255).value,
        ... )
        >>> result = handler.handle(command)
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str


@dataclass(frozen=True, kw_only=True)
class AddAsset:
    """Add a crypto holding to a portfolio.

    Increments total_assets and adds floor(amount * price_usd / 1e6) to
    total_value_usd.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
        symbol: Asset symbol (at most 32 bytes).
        amount: Scaled quantity (> 0).
        price_usd: Scaled unit price (> 0).
        network: Network name (at most 32 bytes).
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str
    symbol: str
    amount: int
    price_usd: int
    network: str


@dataclass(frozen=True, kw_only=True)
class UpdateAsset:
    """Change an asset's amount and/or price.

    The portfolio total is rebalanced by the difference in asset value.
    At least one of new_amount / new_price_usd must be provided; zero is
    allowed (a position may be emptied).

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
        asset_address: Asset to update (must reference the portfolio).
        new_amount: New scaled quantity, or None to keep.
        new_price_usd: New scaled price, or None to keep.
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str
    asset_address: str
    new_amount: int | None = None
    new_price_usd: int | None = None


@dataclass(frozen=True, kw_only=True)
class RecordTransaction:
    """Append an immutable transaction record.

    Does not affect portfolio totals. transaction_id uniqueness is not
    enforced.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
        transaction_id: Caller identifier (at most 64 bytes).
        amount: Signed scaled amount (negative for outflows).
        transaction_type: Type label (at most 32 bytes).
        category: Category label (at most 32 bytes).
        description: Free text (at most 128 bytes).
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str
    transaction_id: str
    amount: int
    transaction_type: str
    category: str = ""
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class CreateGoal:
    """Create a savings goal in a portfolio.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
        name: Goal name (at most 64 bytes).
        target_amount: Scaled target (> 0).
        target_date: Desired completion date (timezone-aware).
        category: Category label (at most 32 bytes).
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str
    name: str
    target_amount: int
    target_date: datetime
    category: str = ""


@dataclass(frozen=True, kw_only=True)
class UpdateGoalProgress:
    """Add progress to a goal.

    State Transition: IN_PROGRESS → COMPLETED once current >= target.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
        goal_address: Goal to update (must reference the portfolio).
        amount_to_add: Scaled progress (> 0).
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str
    goal_address: str
    amount_to_add: int
