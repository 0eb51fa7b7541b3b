"""Address derivation adapters."""

from portfolio_ledger.infrastructure.addressing.sha256_address_deriver import (
    Sha256AddressDeriver,
)

__all__ = ["Sha256AddressDeriver"]
