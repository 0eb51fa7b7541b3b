"""Ledger record kinds.

Each persisted record carries its kind so the store can decode the payload
with the matching fixed layout.
"""

from enum import Enum


class RecordKind(str, Enum):
    """Kinds of records held in the ledger store."""

    PORTFOLIO = "portfolio"
    CRYPTO_ASSET = "crypto_asset"
    TRANSACTION_RECORD = "transaction_record"
    FINANCIAL_GOAL = "financial_goal"
