"""Address deriver protocol.

Maps (domain tag, identity, disambiguator) to a canonical record address with
a pure, deterministic, collision-resistant function. Records are located by
recomputing their address; no lookup table is kept.

Implementations:
    - Sha256AddressDeriver (infrastructure/addressing)
"""

from typing import Protocol
from uuid import UUID

from portfolio_ledger.core.errors import ValidationError
from portfolio_ledger.core.result import Result
from portfolio_ledger.domain.value_objects.address import Address

Disambiguator = int | str | UUID
"""Portfolio disambiguators are small ints; dependent records use UUID keys."""


class AddressDeriverProtocol(Protocol):
    """Protocol for deterministic address derivation."""

    def derive(
        self,
        domain: str,
        identity: str,
        disambiguator: Disambiguator,
    ) -> Address:
        """Derive the canonical address.

        Args:
            domain: Record-kind domain tag (e.g. "portfolio").
            identity: Owner identity or parent record address.
            disambiguator: Value separating records of the same identity.

        Returns:
            Address: Deterministic address.
        """
        ...

    def validate(
        self,
        claimed: str | Address,
        domain: str,
        identity: str,
        disambiguator: Disambiguator,
    ) -> Result[Address, ValidationError]:
        """Recompute the address and compare with the claimed one.

        Args:
            claimed: Address supplied by the caller.
            domain: Record-kind domain tag.
            identity: Owner identity or parent record address.
            disambiguator: Disambiguator supplied by the caller.

        Returns:
            Success(Address): Claimed address matches.
            Failure(ValidationError): INVALID_ADDRESS on mismatch or malformed input.
        """
        ...
