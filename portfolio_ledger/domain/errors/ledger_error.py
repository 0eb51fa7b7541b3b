"""Ledger domain error messages.

Message constants paired with ErrorCode values when handlers build
DomainError results. Kept in one place so operations report identical
wording for identical failures.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from portfolio_ledger.domain.errors import LedgerError

    return Failure(error=AuthorizationError(
        code=ErrorCode.UNAUTHORIZED,
        message=LedgerError.NOT_PORTFOLIO_OWNER,
    ))
"""


class LedgerError:
    """Ledger error message constants.

    Error Categories:
        - Addressing: INVALID_PORTFOLIO_ADDRESS
        - Authorization: NOT_PORTFOLIO_OWNER
        - Lookup: PORTFOLIO_NOT_FOUND, ASSET_NOT_FOUND, GOAL_NOT_FOUND
        - Conflict: PORTFOLIO_ALREADY_EXISTS, GOAL_ALREADY_COMPLETED
        - Integrity: TOTAL_VALUE_OVERFLOW, GOAL_PROGRESS_OVERFLOW,
          AGGREGATE_CORRUPTION
    """

    # -------------------------------------------------------------------------
    # Addressing / Authorization
    # -------------------------------------------------------------------------

    INVALID_PORTFOLIO_ADDRESS = (
        "Portfolio address does not match owner identity and disambiguator"
    )
    """Claimed address differs from the derived one."""

    NOT_PORTFOLIO_OWNER = "Caller is not the portfolio owner"
    """Caller identity differs from the portfolio owner."""

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    PORTFOLIO_NOT_FOUND = "Portfolio not found"
    """No portfolio record at the derived address."""

    ASSET_NOT_FOUND = "Asset not found in portfolio"
    """No asset at the address, or it references another portfolio."""

    GOAL_NOT_FOUND = "Goal not found in portfolio"
    """No goal at the address, or it references another portfolio."""

    # -------------------------------------------------------------------------
    # Conflict Errors
    # -------------------------------------------------------------------------

    PORTFOLIO_ALREADY_EXISTS = "Portfolio already exists at derived address"
    """Initialization attempted twice for the same owner/disambiguator."""

    GOAL_ALREADY_COMPLETED = "Goal already completed"
    """Progress rejected on a completed goal (strict policy only)."""

    NO_ASSET_CHANGES = "At least one of amount or price_usd must be provided"
    """Update carried neither field."""

    # -------------------------------------------------------------------------
    # Integrity Errors
    # -------------------------------------------------------------------------

    TOTAL_VALUE_OVERFLOW = "Portfolio total value exceeds unsigned 64-bit range"
    """Adding an asset value would overflow the aggregate."""

    ASSET_COUNT_OVERFLOW = "Portfolio asset count exceeds unsigned 64-bit range"
    """Asset counter cannot be incremented."""

    GOAL_PROGRESS_OVERFLOW = "Goal progress exceeds unsigned 64-bit range"
    """Adding progress would overflow current_amount."""

    AGGREGATE_CORRUPTION = (
        "Portfolio total value would become negative; aggregate is inconsistent"
    )
    """Recorded total was already smaller than its components."""
