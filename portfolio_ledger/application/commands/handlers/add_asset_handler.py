"""AddAsset command handler.

Creates a crypto asset and folds its value into the portfolio aggregate.

Flow:
    1. Guard: address, existence, ownership
    2. Validate symbol/network bounds and positive amount/price
    3. value = floor(amount * price_usd / 1e6) (exact, unbounded)
    4. total_assets += 1, total_value_usd += value (checked)
    5. Persist asset + portfolio together
"""

from collections.abc import Callable
from uuid import UUID

from uuid_extensions import uuid7

from portfolio_ledger.application.commands.ledger_commands import AddAsset
from portfolio_ledger.application.services.ledger_failures import (
    field_failure,
    integrity_failure,
    rejection_event,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.constants import ASSET_ADDRESS_DOMAIN
from portfolio_ledger.core.errors import DomainError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import CryptoAsset
from portfolio_ledger.domain.errors import LedgerError
from portfolio_ledger.domain.events.ledger_events import AssetAdded
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import InvalidFieldError, validate_positive
from portfolio_ledger.domain.value_objects.fixed_point import (
    FixedPointOverflowError,
)


class AddAssetHandler:
    """Handler for AddAsset command.

    Dependencies (injected via constructor):
        - LedgerRepository: For persistence
        - PortfolioGuard: For address/ownership checks
        - EventBusProtocol: For domain events
        - ClockProtocol: For timestamps
        - record_key_factory: Mints record keys (uuid7 by default)
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        guard: PortfolioGuard,
        event_bus: EventBusProtocol,
        clock: ClockProtocol,
        record_key_factory: Callable[[], UUID] = uuid7,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            ledger_repo: Ledger record repository.
            guard: Portfolio guard service.
            event_bus: Event bus for publishing domain events.
            clock: Time source.
            record_key_factory: Factory for new record keys.
        """
        self._ledger_repo = ledger_repo
        self._guard = guard
        self._event_bus = event_bus
        self._clock = clock
        self._record_key_factory = record_key_factory

    def handle(self, cmd: AddAsset) -> Result[CryptoAsset, DomainError]:
        """Handle AddAsset command.

        Args:
            cmd: AddAsset command.

        Returns:
            Success(CryptoAsset): Asset created, portfolio totals updated.
            Failure(DomainError): InvalidAddress, PortfolioNotFound,
                Unauthorized, InvalidInput, InvalidAmount or Overflow.
                Nothing is written.

        Side Effects:
            - Persists new asset and updated portfolio (on success)
            - Publishes AssetAdded or LedgerOperationRejected
        """
        result = self._add(cmd)

        if isinstance(result, Failure):
            self._event_bus.publish(
                rejection_event(
                    operation="AddAsset",
                    caller=cmd.caller,
                    portfolio_address=cmd.portfolio_address,
                    error=result.error,
                )
            )

        return result

    def _add(self, cmd: AddAsset) -> Result[CryptoAsset, DomainError]:
        portfolio_result = self._guard.load_owned_portfolio(
            caller=cmd.caller,
            owner_identity=cmd.owner_identity,
            disambiguator=cmd.disambiguator,
            portfolio_address=cmd.portfolio_address,
        )
        if isinstance(portfolio_result, Failure):
            return portfolio_result
        portfolio = portfolio_result.value

        now = self._clock.now()
        try:
            asset = CryptoAsset(
                address=self._guard.record_address(
                    ASSET_ADDRESS_DOMAIN, portfolio, self._record_key_factory()
                ),
                portfolio_address=portfolio.address,
                symbol=cmd.symbol,
                amount=cmd.amount,
                price_usd=cmd.price_usd,
                network=cmd.network,
                last_updated=now,
            )
            validate_positive(asset.amount, field="amount")
            validate_positive(asset.price_usd, field="price_usd")
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        value = asset.value_usd
        try:
            portfolio.register_asset(value, now)
        except FixedPointOverflowError as e:
            return Failure(
                error=integrity_failure(
                    e,
                    resource_id=portfolio.address.value,
                    overflow_message=(
                        LedgerError.ASSET_COUNT_OVERFLOW
                        if e.operation == "total_assets"
                        else LedgerError.TOTAL_VALUE_OVERFLOW
                    ),
                )
            )

        self._ledger_repo.save_all(created=[asset], updated=[portfolio])

        self._event_bus.publish(
            AssetAdded(
                portfolio_address=portfolio.address.value,
                asset_address=asset.address.value,
                symbol=asset.symbol,
                value_usd=value,
                total_value_usd=portfolio.total_value_usd,
                total_assets=portfolio.total_assets,
            )
        )

        return Success(value=asset)
