"""Ledger record database model.

Every ledger record (portfolio, crypto asset, transaction record, financial
goal) is one row keyed by its address. The entity itself lives in `payload`
as a fixed-layout binary blob (see record_layout); the other columns exist
for lookup and listing.
"""

from sqlalchemy import Index, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_ledger.infrastructure.persistence.base import BaseMutableModel


class LedgerRecordModel(BaseMutableModel):
    """Address-keyed ledger record.

    Fields:
        id: Insertion sequence (from BaseModel)
        created_at: Row insert time (from BaseModel)
        updated_at: Row update time (from TimestampMixin)
        address: Record address (64 hex characters), unique
        kind: Record kind (portfolio, crypto_asset, ...)
        portfolio_address: Owning portfolio for dependent records, NULL for
            portfolios
        payload: Fixed-layout encoded entity

    Indexes:
        - ix_ledger_records_address: (address) UNIQUE - primary lookup key
        - idx_ledger_records_portfolio_kind: (portfolio_address, kind, id) -
          list dependents of one kind in creation order
    """

    __tablename__ = "ledger_records"

    address: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Record address (hex SHA-256)",
    )

    kind: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Record kind: portfolio, crypto_asset, transaction_record, "
        "financial_goal",
    )

    portfolio_address: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        comment="Owning portfolio address (NULL for portfolio records)",
    )

    payload: Mapped[bytes] = mapped_column(
        LargeBinary,
        nullable=False,
        comment="Fixed-layout encoded record",
    )

    __table_args__ = (
        Index(
            "idx_ledger_records_portfolio_kind",
            "portfolio_address",
            "kind",
            "id",
        ),
    )

    def __repr__(self) -> str:
        """Return string representation.

        Returns:
            str: Kind and address.
        """
        return f"<LedgerRecordModel(kind={self.kind}, address={self.address})>"
