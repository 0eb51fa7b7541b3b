"""Ledger input validators.

Usage:
    from portfolio_ledger.domain.validators import validate_text
"""

from portfolio_ledger.domain.validators.functions import (
    InvalidFieldError,
    validate_disambiguator,
    validate_positive,
    validate_signed,
    validate_text,
    validate_timestamp,
    validate_unsigned,
)

__all__ = [
    "InvalidFieldError",
    "validate_disambiguator",
    "validate_positive",
    "validate_signed",
    "validate_text",
    "validate_timestamp",
    "validate_unsigned",
]
