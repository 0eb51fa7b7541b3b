"""UpdateAsset command handler.

Changes an asset's amount and/or price and rebalances the portfolio total
by the difference in asset value:

    total_value_usd = total_value_usd - old_value + new_value

The subtraction happens in an unbounded signed intermediate. A negative
result means the recorded total was already inconsistent and is reported
as AggregateCorruption; nothing is written in that case.
"""

from portfolio_ledger.application.commands.ledger_commands import UpdateAsset
from portfolio_ledger.application.services.ledger_failures import (
    field_failure,
    integrity_failure,
    rejection_event,
)
from portfolio_ledger.application.services.portfolio_guard import PortfolioGuard
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import DomainError, ValidationError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import CryptoAsset
from portfolio_ledger.domain.errors import LedgerError
from portfolio_ledger.domain.events.ledger_events import AssetUpdated
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import EventBusProtocol
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import InvalidFieldError, validate_unsigned
from portfolio_ledger.domain.value_objects.fixed_point import position_value


class UpdateAssetHandler:
    """Handler for UpdateAsset command.

    Dependencies (injected via constructor):
        - LedgerRepository: For persistence
        - PortfolioGuard: For address/ownership/back-reference checks
        - EventBusProtocol: For domain events
        - ClockProtocol: For timestamps
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        guard: PortfolioGuard,
        event_bus: EventBusProtocol,
        clock: ClockProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            ledger_repo: Ledger record repository.
            guard: Portfolio guard service.
            event_bus: Event bus for publishing domain events.
            clock: Time source.
        """
        self._ledger_repo = ledger_repo
        self._guard = guard
        self._event_bus = event_bus
        self._clock = clock

    def handle(self, cmd: UpdateAsset) -> Result[CryptoAsset, DomainError]:
        """Handle UpdateAsset command.

        Args:
            cmd: UpdateAsset command.

        Returns:
            Success(CryptoAsset): Asset updated, portfolio total rebalanced.
            Failure(DomainError): InvalidAddress, PortfolioNotFound,
                Unauthorized, AssetNotFound, InvalidInput, InvalidAmount,
                Overflow or AggregateCorruption. Nothing is written.

        Side Effects:
            - Persists updated asset and portfolio (on success)
            - Publishes AssetUpdated or LedgerOperationRejected
        """
        result = self._update(cmd)

        if isinstance(result, Failure):
            self._event_bus.publish(
                rejection_event(
                    operation="UpdateAsset",
                    caller=cmd.caller,
                    portfolio_address=cmd.portfolio_address,
                    error=result.error,
                )
            )

        return result

    def _update(self, cmd: UpdateAsset) -> Result[CryptoAsset, DomainError]:
        # Step 1: Portfolio address, existence, ownership
        portfolio_result = self._guard.load_owned_portfolio(
            caller=cmd.caller,
            owner_identity=cmd.owner_identity,
            disambiguator=cmd.disambiguator,
            portfolio_address=cmd.portfolio_address,
        )
        if isinstance(portfolio_result, Failure):
            return portfolio_result
        portfolio = portfolio_result.value

        # Step 2: Asset must reference this portfolio
        asset_result = self._guard.load_asset(portfolio, cmd.asset_address)
        if isinstance(asset_result, Failure):
            return asset_result
        asset = asset_result.value

        # Step 3: Validate provided fields (zero allowed)
        if cmd.new_amount is None and cmd.new_price_usd is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=LedgerError.NO_ASSET_CHANGES,
                    field="new_amount",
                )
            )
        try:
            if cmd.new_amount is not None:
                validate_unsigned(cmd.new_amount, field="new_amount")
            if cmd.new_price_usd is not None:
                validate_unsigned(cmd.new_price_usd, field="new_price_usd")
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        # Step 4: Rebalance before touching the asset
        old_value = asset.value_usd
        new_value = position_value(
            asset.amount if cmd.new_amount is None else cmd.new_amount,
            asset.price_usd if cmd.new_price_usd is None else cmd.new_price_usd,
        )

        now = self._clock.now()
        try:
            portfolio.revalue_asset(old_value, new_value, now)
        except ArithmeticError as e:
            return Failure(
                error=integrity_failure(
                    e,
                    resource_id=portfolio.address.value,
                    overflow_message=LedgerError.TOTAL_VALUE_OVERFLOW,
                )
            )

        asset.reprice(now, amount=cmd.new_amount, price_usd=cmd.new_price_usd)

        # Step 5: Persist both records together
        self._ledger_repo.save_all(updated=[asset, portfolio])

        self._event_bus.publish(
            AssetUpdated(
                portfolio_address=portfolio.address.value,
                asset_address=asset.address.value,
                symbol=asset.symbol,
                previous_value_usd=old_value,
                new_value_usd=new_value,
                total_value_usd=portfolio.total_value_usd,
            )
        )

        return Success(value=asset)
