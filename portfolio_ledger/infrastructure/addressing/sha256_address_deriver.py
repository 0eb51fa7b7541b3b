"""SHA-256 address deriver.

Address = SHA256(namespace || lp(domain) || lp(identity) || lp(disambiguator))
where lp(x) is a 4-byte big-endian length prefix followed by x. Length
prefixing keeps ("ab", "c") and ("a", "bc") apart. The disambiguator is
tagged by type so 7, "7" and a UUID never encode to the same bytes.

Security:
- SHA-256 (64 hex characters)
- Collision resistance bounded by SHA-256
- Pure: no state, no clock, no randomness
"""

import hashlib
from uuid import UUID

from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.core.errors import ValidationError
from portfolio_ledger.core.result import Failure, Result, Success
from portfolio_ledger.domain.errors import LedgerError
from portfolio_ledger.domain.protocols.address_deriver_protocol import Disambiguator
from portfolio_ledger.domain.value_objects.address import Address

NAMESPACE = b"portfolio-ledger/address/v1"


def _length_prefixed(data: bytes) -> bytes:
    return len(data).to_bytes(4, "big") + data


def _disambiguator_bytes(disambiguator: Disambiguator) -> bytes:
    """Encode a disambiguator with a one-byte type tag.

    Raises:
        TypeError: For unsupported types (including bool).
        ValueError: For negative integers.
    """
    if isinstance(disambiguator, UUID):
        return b"u" + disambiguator.bytes
    if isinstance(disambiguator, bool):
        raise TypeError("Disambiguator cannot be a bool")
    if isinstance(disambiguator, int):
        if disambiguator < 0:
            raise ValueError("Disambiguator cannot be negative")
        width = max(1, (disambiguator.bit_length() + 7) // 8)
        return b"i" + disambiguator.to_bytes(width, "big")
    if isinstance(disambiguator, str):
        return b"s" + disambiguator.encode("utf-8")
    raise TypeError(f"Unsupported disambiguator type: {type(disambiguator).__name__}")


class Sha256AddressDeriver:
    """Deterministic SHA-256 address deriver.

    Implements AddressDeriverProtocol (structural typing, no inheritance).

    Example:
        >>> deriver = Sha256AddressDeriver()
        >>> a = deriver.derive("portfolio", "alice", 255)
        >>> a == deriver.derive("portfolio", "alice", 255)
        True
        >>> a == deriver.derive("portfolio", "alice", 254)
        False
    """

    def derive(
        self,
        domain: str,
        identity: str,
        disambiguator: Disambiguator,
    ) -> Address:
        """Derive the canonical address.

        Args:
            domain: Record-kind domain tag.
            identity: Owner identity or parent address.
            disambiguator: Int, str or UUID.

        Returns:
            Address: Hex SHA-256 digest.

        Raises:
            TypeError: Unsupported disambiguator type.
            ValueError: Negative integer disambiguator.
        """
        hasher = hashlib.sha256(NAMESPACE)
        hasher.update(_length_prefixed(domain.encode("utf-8")))
        hasher.update(_length_prefixed(identity.encode("utf-8")))
        hasher.update(_length_prefixed(_disambiguator_bytes(disambiguator)))
        return Address.from_digest(hasher.digest())

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
            identity: Owner identity or parent address.
            disambiguator: Disambiguator supplied by the caller.

        Returns:
            Success(Address): The derived address (equal to claimed).
            Failure(ValidationError): INVALID_ADDRESS.
        """
        try:
            claimed_address = (
                claimed if isinstance(claimed, Address) else Address(claimed)
            )
            expected = self.derive(domain, identity, disambiguator)
        except (TypeError, ValueError) as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ADDRESS,
                    message=f"{LedgerError.INVALID_PORTFOLIO_ADDRESS}: {e}",
                    field="portfolio_address",
                )
            )

        if claimed_address != expected:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ADDRESS,
                    message=LedgerError.INVALID_PORTFOLIO_ADDRESS,
                    field="portfolio_address",
                    details={
                        "claimed": claimed_address.value,
                        "expected": expected.value,
                    },
                )
            )

        return Success(value=expected)
