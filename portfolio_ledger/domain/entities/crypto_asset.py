"""CryptoAsset domain entity.

A single holding inside a portfolio: a quantity of one symbol on one network
at a unit price. Both quantity and price are fixed-point with six decimals.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Back-reference (portfolio_address) fixed at creation
    - Only AddAsset creates and only UpdateAsset mutates assets

Usage:
    asset = CryptoAsset(
        address=asset_address,
        portfolio_address=portfolio.address,
        symbol="BTC",
        amount=1_000_000,          # 1.000000 BTC
        price_usd=50_000_000_000,  # $50,000.000000
        network="bitcoin",
        last_updated=now,
    )
    asset.value_usd  # 50_000_000_000
"""

from dataclasses import dataclass
from datetime import datetime

from portfolio_ledger.core.constants import NETWORK_MAX_BYTES, SYMBOL_MAX_BYTES
from portfolio_ledger.domain.validators import (
    validate_text,
    validate_timestamp,
    validate_unsigned,
)
from portfolio_ledger.domain.value_objects.address import Address
from portfolio_ledger.domain.value_objects.fixed_point import position_value


@dataclass
class CryptoAsset:
    """Crypto holding in a portfolio.

    Attributes:
        address: Record address (derived from portfolio address + record key).
        portfolio_address: Owning portfolio (back-reference).
        symbol: Asset symbol, at most 32 UTF-8 bytes.
        amount: Scaled quantity held.
        price_usd: Scaled unit price in USD.
        network: Chain/network name, at most 32 UTF-8 bytes.
        last_updated: Timestamp of creation or last update.
    """

    address: Address
    portfolio_address: Address
    symbol: str
    amount: int
    price_usd: int
    network: str
    last_updated: datetime

    def __post_init__(self) -> None:
        """Validate asset after initialization.

        Raises:
            ValueError: If any field is outside its allowed domain.
        """
        validate_text(self.symbol, field="symbol", max_bytes=SYMBOL_MAX_BYTES)
        validate_text(self.network, field="network", max_bytes=NETWORK_MAX_BYTES)
        validate_unsigned(self.amount, field="amount")
        validate_unsigned(self.price_usd, field="price_usd")
        validate_timestamp(self.last_updated, field="last_updated")

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def value_usd(self) -> int:
        """Scaled USD value: floor(amount * price_usd / 1_000_000).

        Returns:
            int: Position value (may exceed 2**64 - 1 for extreme inputs).
        """
        return position_value(self.amount, self.price_usd)

    # =========================================================================
    # Query Methods
    # =========================================================================

    def belongs_to(self, portfolio_address: Address) -> bool:
        """Check the back-reference.

        Args:
            portfolio_address: Portfolio the caller claims owns this asset.

        Returns:
            True if this asset references that portfolio.
        """
        return self.portfolio_address == portfolio_address

    # =========================================================================
    # Update Methods
    # =========================================================================

    def reprice(
        self,
        now: datetime,
        amount: int | None = None,
        price_usd: int | None = None,
    ) -> None:
        """Apply a new amount and/or price.

        Absent fields stay unchanged.

        Args:
            now: Operation timestamp.
            amount: New scaled quantity, if changing.
            price_usd: New scaled price, if changing.

        Side Effects:
            - Updates amount / price_usd when provided
            - Sets last_updated
        """
        if amount is not None:
            self.amount = amount

        if price_usd is not None:
            self.price_usd = price_usd

        self.last_updated = now
