"""Ledger DTOs (Data Transfer Objects).

Result dataclasses for query handlers.

DTOs:
    - PortfolioSummary: Result from GetPortfolio query
    - ReconciliationReport: Result from ReconcilePortfolio query
"""

from dataclasses import dataclass
from datetime import datetime

from portfolio_ledger.domain.entities import Portfolio
from portfolio_ledger.domain.value_objects.fixed_point import to_decimal_string


@dataclass
class PortfolioSummary:
    """Portfolio state for display.

    Attributes:
        address: Portfolio address.
        owner: Owner identity.
        disambiguator: Derivation disambiguator.
        total_assets: Assets ever added.
        total_value_usd: Scaled USD total.
        total_value_usd_display: Total rendered with six decimals.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    address: str
    owner: str
    disambiguator: int
    total_assets: int
    total_value_usd: int
    total_value_usd_display: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, portfolio: Portfolio) -> "PortfolioSummary":
        """Build a summary from a portfolio entity.

        Args:
            portfolio: Loaded portfolio.

        Returns:
            PortfolioSummary.
        """
        return cls(
            address=portfolio.address.value,
            owner=portfolio.owner,
            disambiguator=portfolio.disambiguator,
            total_assets=portfolio.total_assets,
            total_value_usd=portfolio.total_value_usd,
            total_value_usd_display=to_decimal_string(portfolio.total_value_usd),
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
        )


@dataclass
class ReconciliationReport:
    """Recorded aggregate versus the value recomputed from assets.

    Attributes:
        portfolio_address: Audited portfolio.
        recorded_total_value_usd: total_value_usd stored on the portfolio.
        computed_total_value_usd: Sum of floor(amount * price / 1e6) over
            the portfolio's assets.
        recorded_total_assets: total_assets stored on the portfolio.
        asset_count: Number of asset records referencing the portfolio.
    """

    portfolio_address: str
    recorded_total_value_usd: int
    computed_total_value_usd: int
    recorded_total_assets: int
    asset_count: int

    @property
    def is_consistent(self) -> bool:
        """Check both aggregates agree with the asset records.

        Returns:
            True if value and count both match.
        """
        return (
            self.recorded_total_value_usd == self.computed_total_value_usd
            and self.recorded_total_assets == self.asset_count
        )

    @property
    def value_drift(self) -> int:
        """Recorded minus computed total (zero when consistent).

        Returns:
            Signed difference.
        """
        return self.recorded_total_value_usd - self.computed_total_value_usd
