"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from portfolio_ledger.infrastructure.persistence.models.ledger_record import (
    LedgerRecordModel,
)

__all__ = ["LedgerRecordModel"]
