"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_ALREADY_COMPLETED)
- Authorization errors (UNAUTHORIZED)
- Ledger integrity violations (ARITHMETIC_OVERFLOW, AGGREGATE_CORRUPTION)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_INPUT = "invalid_input"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_ADDRESS = "invalid_address"

    # Resource errors
    PORTFOLIO_NOT_FOUND = "portfolio_not_found"
    ASSET_NOT_FOUND = "asset_not_found"
    GOAL_NOT_FOUND = "goal_not_found"

    # Conflict errors
    PORTFOLIO_ALREADY_EXISTS = "portfolio_already_exists"
    GOAL_ALREADY_COMPLETED = "goal_already_completed"

    # Authorization errors
    UNAUTHORIZED = "unauthorized"

    # Ledger integrity violations
    ARITHMETIC_OVERFLOW = "arithmetic_overflow"
    AGGREGATE_CORRUPTION = "aggregate_corruption"
