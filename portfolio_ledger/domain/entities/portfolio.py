"""Portfolio domain entity.

The per-owner aggregate. Its totals summarize the crypto assets that
reference it and are only ever changed together with those assets.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Addressed deterministically from (owner, disambiguator)
    - Aggregate arithmetic delegated to fixed_point (raises on bound violation)

Usage:
    portfolio = Portfolio(
        address=deriver.derive("portfolio", owner, 254),
        owner=owner,
        disambiguator=254,
        created_at=now,
        updated_at=now,
    )
    portfolio.register_asset(value=50_000_000_000, now=now)
"""

from dataclasses import dataclass
from datetime import datetime

from portfolio_ledger.core.constants import OWNER_IDENTITY_MAX_BYTES
from portfolio_ledger.domain.validators import (
    validate_disambiguator,
    validate_text,
    validate_timestamp,
    validate_unsigned,
)
from portfolio_ledger.domain.value_objects.address import Address
from portfolio_ledger.domain.value_objects.fixed_point import checked_add, rebalance


@dataclass
class Portfolio:
    """Per-owner portfolio aggregate.

    Invariants:
        - total_value_usd equals the sum of floor(amount * price / 1e6) over
          every asset referencing this portfolio.
        - total_assets counts every asset ever added (never decreases).

    Attributes:
        address: Deterministic address derived from owner + disambiguator.
        owner: Owner principal identifier (pre-verified by the caller).
        disambiguator: Value mixed into the address derivation (0-255).
        created_at: Creation timestamp (injected clock).
        updated_at: Last modification timestamp.
        total_assets: Number of assets ever added.
        total_value_usd: Scaled USD total (6 decimals, unsigned 64-bit).
    """

    address: Address
    owner: str
    disambiguator: int
    created_at: datetime
    updated_at: datetime
    total_assets: int = 0
    total_value_usd: int = 0

    def __post_init__(self) -> None:
        """Validate portfolio after initialization.

        Raises:
            ValueError: If any field is outside its allowed domain.
        """
        validate_text(
            self.owner,
            field="owner",
            max_bytes=OWNER_IDENTITY_MAX_BYTES,
            required=True,
        )
        validate_unsigned(self.total_assets, field="total_assets")
        validate_unsigned(self.total_value_usd, field="total_value_usd")
        validate_timestamp(self.created_at, field="created_at")
        validate_timestamp(self.updated_at, field="updated_at")
        validate_disambiguator(self.disambiguator)

    # =========================================================================
    # Query Methods
    # =========================================================================

    def is_owned_by(self, identity: str) -> bool:
        """Check whether identity is the owner.

        Args:
            identity: Pre-verified caller identity.

        Returns:
            True on exact match.
        """
        return self.owner == identity

    # =========================================================================
    # Update Methods
    # =========================================================================

    def register_asset(self, value: int, now: datetime) -> None:
        """Account for a newly added asset.

        Both new totals are computed before either is assigned, so a bound
        violation leaves the portfolio untouched.

        Args:
            value: Scaled USD value of the new asset.
            now: Operation timestamp.

        Raises:
            FixedPointOverflowError: If a total would exceed 2**64 - 1.

        Side Effects:
            - Increments total_assets
            - Adds value to total_value_usd
            - Sets updated_at
        """
        new_total_value = checked_add(
            self.total_value_usd, value, "total_value_usd"
        )
        new_total_assets = checked_add(self.total_assets, 1, "total_assets")

        self.total_value_usd = new_total_value
        self.total_assets = new_total_assets
        self.updated_at = now

    def revalue_asset(self, old_value: int, new_value: int, now: datetime) -> None:
        """Replace one asset's contribution to the total value.

        Args:
            old_value: Asset value before the update.
            new_value: Asset value after the update.
            now: Operation timestamp.

        Raises:
            AggregateUnderflowError: If the total would become negative.
            FixedPointOverflowError: If the total would exceed 2**64 - 1.
        """
        self.total_value_usd = rebalance(self.total_value_usd, old_value, new_value)
        self.updated_at = now

    def touch(self, now: datetime) -> None:
        """Refresh updated_at after a dependent record changed.

        Args:
            now: Operation timestamp.
        """
        self.updated_at = now
