"""Portfolio guard service.

Centralizes the checks every ledger operation runs before it touches a
record: the claimed portfolio address must match the derivation, the
portfolio must exist, the caller must own it, and any dependent record must
reference it. Returns the loaded entities on success (avoid double fetch).

Architecture:
    - Application service (not domain - uses repositories)
    - Used by command and query handlers to avoid duplicating checks
    - Never mutates anything

Check Order:
    1. Input shape (owner identity, disambiguator)   → InvalidInput
    2. Address derivation matches claimed address    → InvalidAddress
    3. Portfolio record exists                       → PortfolioNotFound
    4. caller == portfolio.owner                     → Unauthorized
    5. Dependent record exists and references it     → AssetNotFound / GoalNotFound

Usage:
    guard = PortfolioGuard(ledger_repo, address_deriver, "portfolio")
    result = guard.load_owned_portfolio(
        caller=cmd.caller,
        owner_identity=cmd.owner_identity,
        disambiguator=cmd.disambiguator,
        portfolio_address=cmd.portfolio_address,
    )
"""

from typing import cast
from uuid import UUID

from portfolio_ledger.application.services.ledger_failures import field_failure
from portfolio_ledger.core.constants import OWNER_IDENTITY_MAX_BYTES
from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import (
    AuthorizationError,
    DomainError,
    NotFoundError,
)
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.entities import CryptoAsset, FinancialGoal, Portfolio
from portfolio_ledger.domain.errors import LedgerError
from portfolio_ledger.domain.protocols.address_deriver_protocol import (
    AddressDeriverProtocol,
)
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRepository
from portfolio_ledger.domain.validators import (
    InvalidFieldError,
    validate_disambiguator,
    validate_text,
)
from portfolio_ledger.domain.value_objects.address import Address


def _parse_address(value: str) -> Address | None:
    try:
        return Address(value)
    except ValueError:
        return None


class PortfolioGuard:
    """Service resolving and authorizing portfolio-scoped requests.

    Dependencies (injected via constructor):
        - LedgerRepository: For record lookup
        - AddressDeriverProtocol: For address recomputation
        - portfolio_domain: Domain tag for portfolio addresses (from settings)
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        address_deriver: AddressDeriverProtocol,
        portfolio_domain: str,
    ) -> None:
        """Initialize guard with dependencies.

        Args:
            ledger_repo: Repository for record lookup.
            address_deriver: Deriver used to recompute addresses.
            portfolio_domain: Domain tag mixed into portfolio addresses.
        """
        self._ledger_repo = ledger_repo
        self._address_deriver = address_deriver
        self._portfolio_domain = portfolio_domain

    def resolve_address(
        self,
        *,
        owner_identity: str,
        disambiguator: int,
        portfolio_address: str,
    ) -> Result[Address, DomainError]:
        """Validate inputs and recompute the portfolio address.

        Args:
            owner_identity: Claimed owner.
            disambiguator: Claimed disambiguator.
            portfolio_address: Claimed address.

        Returns:
            Success(Address): Derived address (equal to the claimed one).
            Failure(ValidationError): INVALID_INPUT or INVALID_ADDRESS.
        """
        try:
            validate_text(
                owner_identity,
                field="owner_identity",
                max_bytes=OWNER_IDENTITY_MAX_BYTES,
                required=True,
            )
            validate_disambiguator(disambiguator)
        except InvalidFieldError as e:
            return Failure(error=field_failure(e))

        return cast(
            Result[Address, DomainError],
            self._address_deriver.validate(
                portfolio_address,
                self._portfolio_domain,
                owner_identity,
                disambiguator,
            ),
        )

    def load_owned_portfolio(
        self,
        *,
        caller: str,
        owner_identity: str,
        disambiguator: int,
        portfolio_address: str,
    ) -> Result[Portfolio, DomainError]:
        """Resolve the portfolio and verify the caller owns it.

        Args:
            caller: Verified identity making the request.
            owner_identity: Claimed owner.
            disambiguator: Claimed disambiguator.
            portfolio_address: Claimed address.

        Returns:
            Success(Portfolio): Portfolio exists and is owned by caller.
            Failure(DomainError): InvalidInput, InvalidAddress,
                PortfolioNotFound or Unauthorized.
        """
        address_result = self.resolve_address(
            owner_identity=owner_identity,
            disambiguator=disambiguator,
            portfolio_address=portfolio_address,
        )
        if isinstance(address_result, Failure):
            return address_result
        address = address_result.value

        portfolio = self._ledger_repo.find_portfolio(address)
        if portfolio is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PORTFOLIO_NOT_FOUND,
                    message=LedgerError.PORTFOLIO_NOT_FOUND,
                    resource_type="Portfolio",
                    resource_id=address.value,
                )
            )

        if not portfolio.is_owned_by(caller):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.UNAUTHORIZED,
                    message=LedgerError.NOT_PORTFOLIO_OWNER,
                    required_permission="portfolio_owner",
                )
            )

        return Success(value=portfolio)

    def load_asset(
        self,
        portfolio: Portfolio,
        asset_address: str,
    ) -> Result[CryptoAsset, DomainError]:
        """Load an asset and verify it references the portfolio.

        Args:
            portfolio: Authorized portfolio.
            asset_address: Claimed asset address.

        Returns:
            Success(CryptoAsset): Asset belongs to the portfolio.
            Failure(NotFoundError): ASSET_NOT_FOUND (missing, malformed
                address, or attached to another portfolio).
        """
        address = _parse_address(asset_address)
        asset = self._ledger_repo.find_asset(address) if address else None

        if asset is None or not asset.belongs_to(portfolio.address):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ASSET_NOT_FOUND,
                    message=LedgerError.ASSET_NOT_FOUND,
                    resource_type="CryptoAsset",
                    resource_id=str(asset_address),
                )
            )

        return Success(value=asset)

    def load_goal(
        self,
        portfolio: Portfolio,
        goal_address: str,
    ) -> Result[FinancialGoal, DomainError]:
        """Load a goal and verify it references the portfolio.

        Args:
            portfolio: Authorized portfolio.
            goal_address: Claimed goal address.

        Returns:
            Success(FinancialGoal): Goal belongs to the portfolio.
            Failure(NotFoundError): GOAL_NOT_FOUND.
        """
        address = _parse_address(goal_address)
        goal = self._ledger_repo.find_goal(address) if address else None

        if goal is None or not goal.belongs_to(portfolio.address):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.GOAL_NOT_FOUND,
                    message=LedgerError.GOAL_NOT_FOUND,
                    resource_type="FinancialGoal",
                    resource_id=str(goal_address),
                )
            )

        return Success(value=goal)

    def record_address(
        self,
        domain: str,
        portfolio: Portfolio,
        record_key: UUID,
    ) -> Address:
        """Derive a dependent record's address.

        Args:
            domain: Record-kind domain tag (crypto_asset, ...).
            portfolio: Owning portfolio.
            record_key: Fresh record key (uuid7).

        Returns:
            Address of the new record.
        """
        return self._address_deriver.derive(
            domain, portfolio.address.value, record_key
        )
