"""TransactionRecord domain entity.

An immutable audit-trail entry. Records never affect portfolio totals; they
only refresh the portfolio's updated_at when appended.

Note:
    transaction_id is caller-supplied and NOT checked for uniqueness. Two
    records may share a transaction_id; they still get distinct addresses.
"""

from dataclasses import dataclass
from datetime import datetime

from portfolio_ledger.core.constants import (
    CATEGORY_MAX_BYTES,
    DESCRIPTION_MAX_BYTES,
    TRANSACTION_ID_MAX_BYTES,
    TRANSACTION_TYPE_MAX_BYTES,
)
from portfolio_ledger.domain.validators import (
    validate_signed,
    validate_text,
    validate_timestamp,
)
from portfolio_ledger.domain.value_objects.address import Address


@dataclass(frozen=True)
class TransactionRecord:
    """Immutable ledger transaction.

    Attributes:
        address: Record address.
        portfolio_address: Owning portfolio (back-reference).
        transaction_id: Caller identifier, at most 64 UTF-8 bytes.
        amount: Signed scaled amount (negative for outflows).
        transaction_type: Type label, at most 32 bytes.
        category: Category label, at most 32 bytes (may be empty).
        description: Free text, at most 128 bytes (may be empty).
        timestamp: When the record was appended.
    """

    address: Address
    portfolio_address: Address
    transaction_id: str
    amount: int
    transaction_type: str
    category: str
    description: str
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate record after initialization.

        Raises:
            ValueError: If any field is outside its allowed domain.
        """
        validate_text(
            self.transaction_id,
            field="transaction_id",
            max_bytes=TRANSACTION_ID_MAX_BYTES,
        )
        validate_signed(self.amount, field="amount")
        validate_text(
            self.transaction_type,
            field="transaction_type",
            max_bytes=TRANSACTION_TYPE_MAX_BYTES,
        )
        validate_text(self.category, field="category", max_bytes=CATEGORY_MAX_BYTES)
        validate_text(
            self.description, field="description", max_bytes=DESCRIPTION_MAX_BYTES
        )
        validate_timestamp(self.timestamp, field="timestamp")

    def is_outflow(self) -> bool:
        """Check if the amount is negative.

        Returns:
            True for outflows.
        """
        return self.amount < 0
