"""Ledger queries (CQRS read operations).

Queries represent requests for ledger data. They are immutable dataclasses
with question-like names. Queries NEVER change state.

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return data
- Queries do NOT emit domain events

Every query is owner-scoped: the caller must own the addressed portfolio.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetPortfolio:
    """Get a portfolio's current state.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.

    Example:
        >>> query = GetPortfolio(
        ...     caller="alice",
        ...     owner_identity="alice",
        ...     disambiguator=255,
        ...     portfolio_address=address,
        ... )
        >>> result = handler.handle(query)
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str


@dataclass(frozen=True, kw_only=True)
class ListAssets:
    """List the crypto assets of a portfolio, in creation order.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str


@dataclass(frozen=True, kw_only=True)
class ListTransactions:
    """List the transaction records of a portfolio, in creation order.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str


@dataclass(frozen=True, kw_only=True)
class ListGoals:
    """List the financial goals of a portfolio, in creation order.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str


@dataclass(frozen=True, kw_only=True)
class ReconcilePortfolio:
    """Recompute a portfolio's aggregates from its assets.

    Attributes:
        caller: Verified identity (must own the portfolio).
        owner_identity: Portfolio owner.
        disambiguator: Portfolio disambiguator.
        portfolio_address: Claimed portfolio address.
    """

    caller: str
    owner_identity: str
    disambiguator: int
    portfolio_address: str
