"""Centralized constants for ledger record layout.

These are fixed properties of the persisted record format, NOT
environment-specific configuration. For settings use
`portfolio_ledger.core.config`.

Categories:
- Field limits: maximum UTF-8 byte length of each variable-length field
- Addressing: domain tags for dependent-record address derivation
- Disambiguators: accepted range for portfolio disambiguators

Example:
    >>> from portfolio_ledger.core.constants import SYMBOL_MAX_BYTES
    >>> len("BTC".encode()) <= SYMBOL_MAX_BYTES
    True
"""

# =============================================================================
# Field Limits (UTF-8 bytes)
# =============================================================================

OWNER_IDENTITY_MAX_BYTES: int = 64
"""Owner principal identifier."""

SYMBOL_MAX_BYTES: int = 32
"""Crypto asset symbol (e.g. "BTC")."""

NETWORK_MAX_BYTES: int = 32
"""Crypto asset network (e.g. "bitcoin", "solana")."""

TRANSACTION_ID_MAX_BYTES: int = 64
"""Caller-supplied transaction identifier."""

TRANSACTION_TYPE_MAX_BYTES: int = 32
"""Transaction type label (e.g. "expense")."""

CATEGORY_MAX_BYTES: int = 32
"""Transaction or goal category."""

DESCRIPTION_MAX_BYTES: int = 128
"""Transaction description."""

GOAL_NAME_MAX_BYTES: int = 64
"""Financial goal name."""


# =============================================================================
# Addressing
# =============================================================================

ASSET_ADDRESS_DOMAIN: str = "crypto_asset"
"""Domain tag for crypto asset addresses."""

TRANSACTION_ADDRESS_DOMAIN: str = "transaction_record"
"""Domain tag for transaction record addresses."""

GOAL_ADDRESS_DOMAIN: str = "financial_goal"
"""Domain tag for financial goal addresses."""

PORTFOLIO_DISAMBIGUATOR_MIN: int = 0
PORTFOLIO_DISAMBIGUATOR_MAX: int = 255
"""Portfolio disambiguators fit in one byte."""
