"""Address value object.

A record address is the lowercase hex SHA-256 digest produced by the
address deriver. Every ledger record is stored and located by its address.
"""

import re
from dataclasses import dataclass

_ADDRESS_PATTERN = re.compile(r"^[0-9a-f]{64}$")


@dataclass(frozen=True)
class Address:
    """Canonical record address.

    Attributes:
        value: 64 lowercase hex characters.

    Raises:
        ValueError: If value is not a well-formed address.

    Example:
        >>> Address("ab" * 32).value[:4]
        'abab'
        >>> Address("not-hex")
        Traceback (most recent call last):
        ...
        ValueError: Invalid address: not-hex
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize to lowercase and validate format.

        Raises:
            ValueError: If value is not 64 hex characters.
        """
        if not isinstance(self.value, str):
            raise ValueError(f"Invalid address: {self.value!r}")
        normalized = self.value.strip().lower()
        if not _ADDRESS_PATTERN.match(normalized):
            raise ValueError(f"Invalid address: {self.value}")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def from_digest(cls, digest: bytes) -> "Address":
        """Build an address from a raw 32-byte digest.

        Args:
            digest: SHA-256 digest bytes.

        Returns:
            Address wrapping the hex digest.
        """
        return cls(digest.hex())

    def to_bytes(self) -> bytes:
        """Return the raw 32-byte form.

        Returns:
            bytes: Digest bytes.
        """
        return bytes.fromhex(self.value)

    def __str__(self) -> str:
        """Return address as string.

        Returns:
            str: The hex address.
        """
        return self.value
