"""Ledger repository protocol.

Defines the persistence contract for the four ledger record kinds. All
records live in one address-keyed store; the repository decodes each payload
into its domain entity.

**Design Principles**:
- Read methods return domain entities, not database models
- Every read returns a fresh entity; mutating it changes nothing until saved
- save_all writes every touched record of one operation atomically
"""

from collections.abc import Sequence
from typing import Protocol

from portfolio_ledger.domain.entities import (
    CryptoAsset,
    FinancialGoal,
    Portfolio,
    TransactionRecord,
)
from portfolio_ledger.domain.value_objects.address import Address

LedgerRecord = Portfolio | CryptoAsset | TransactionRecord | FinancialGoal
"""Any record the ledger persists."""


class RecordExistsError(Exception):
    """Raised when save_all is asked to create a record that already exists."""

    def __init__(self, address: Address) -> None:
        """Initialize error.

        Args:
            address: Address already occupied.
        """
        super().__init__(f"Record already exists at {address}")
        self.address = address


class RecordMissingError(Exception):
    """Raised when save_all is asked to update a record that does not exist."""

    def __init__(self, address: Address) -> None:
        """Initialize error.

        Args:
            address: Address with no record.
        """
        super().__init__(f"No record at {address}")
        self.address = address


class LedgerRepository(Protocol):
    """Protocol for ledger record persistence.

    **Implementation Notes**:
    - Records are keyed by address (primary key)
    - Dependent records are indexed by portfolio address for listing
    - Listing order is creation order
    """

    def exists(self, address: Address) -> bool:
        """Check whether any record lives at address.

        Args:
            address: Record address.

        Returns:
            True if occupied.
        """
        ...

    def find_portfolio(self, address: Address) -> Portfolio | None:
        """Find portfolio by address.

        Args:
            address: Portfolio address.

        Returns:
            Portfolio if found (and of that kind), None otherwise.
        """
        ...

    def find_asset(self, address: Address) -> CryptoAsset | None:
        """Find crypto asset by address.

        Args:
            address: Asset address.

        Returns:
            CryptoAsset if found, None otherwise.
        """
        ...

    def find_transaction(self, address: Address) -> TransactionRecord | None:
        """Find transaction record by address.

        Args:
            address: Record address.

        Returns:
            TransactionRecord if found, None otherwise.
        """
        ...

    def find_goal(self, address: Address) -> FinancialGoal | None:
        """Find financial goal by address.

        Args:
            address: Goal address.

        Returns:
            FinancialGoal if found, None otherwise.
        """
        ...

    def list_assets(self, portfolio_address: Address) -> list[CryptoAsset]:
        """List assets referencing a portfolio.

        Args:
            portfolio_address: Owning portfolio.

        Returns:
            Assets in creation order.
        """
        ...

    def list_transactions(
        self, portfolio_address: Address
    ) -> list[TransactionRecord]:
        """List transaction records referencing a portfolio.

        Args:
            portfolio_address: Owning portfolio.

        Returns:
            Records in creation order.
        """
        ...

    def list_goals(self, portfolio_address: Address) -> list[FinancialGoal]:
        """List goals referencing a portfolio.

        Args:
            portfolio_address: Owning portfolio.

        Returns:
            Goals in creation order.
        """
        ...

    def save_all(
        self,
        *,
        created: Sequence[LedgerRecord] = (),
        updated: Sequence[LedgerRecord] = (),
    ) -> None:
        """Persist one operation's records atomically.

        Args:
            created: Records that must not exist yet.
            updated: Records that must already exist.

        Raises:
            RecordExistsError: A created record's address is occupied.
            RecordMissingError: An updated record does not exist.
            RecordLayoutError: A record does not fit its fixed layout.

        Either every record is written or none is.
        """
        ...
