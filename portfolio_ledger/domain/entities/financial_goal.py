"""FinancialGoal domain entity.

A savings target tracked against a portfolio. Progress only accumulates;
completion is irreversible.

State Machine:
    IN_PROGRESS → COMPLETED (fires when current_amount >= target_amount)
    COMPLETED is terminal.

Usage:
    goal = FinancialGoal(
        address=goal_address,
        portfolio_address=portfolio.address,
        name="Emergency fund",
        target_amount=1_000_000,
        target_date=deadline,
        category="savings",
        created_at=now,
        updated_at=now,
    )
    completed_now = goal.add_progress(1_000_000, now)  # True
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from portfolio_ledger.core.constants import CATEGORY_MAX_BYTES, GOAL_NAME_MAX_BYTES
from portfolio_ledger.domain.enums.goal_status import GoalStatus
from portfolio_ledger.domain.validators import (
    validate_positive,
    validate_text,
    validate_timestamp,
    validate_unsigned,
)
from portfolio_ledger.domain.value_objects.address import Address
from portfolio_ledger.domain.value_objects.fixed_point import checked_add


@dataclass
class FinancialGoal:
    """Savings goal with monotonic completion.

    Attributes:
        address: Record address.
        portfolio_address: Owning portfolio (back-reference).
        name: Goal name, at most 64 UTF-8 bytes.
        target_amount: Scaled target (> 0).
        target_date: Desired completion date.
        category: Category label, at most 32 bytes (may be empty).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        current_amount: Scaled progress so far.
        is_completed: True once current_amount has reached target_amount.
    """

    address: Address
    portfolio_address: Address
    name: str
    target_amount: int
    target_date: datetime
    category: str
    created_at: datetime
    updated_at: datetime
    current_amount: int = 0
    is_completed: bool = False

    def __post_init__(self) -> None:
        """Validate goal after initialization.

        Raises:
            ValueError: If any field is outside its allowed domain.
        """
        validate_text(self.name, field="name", max_bytes=GOAL_NAME_MAX_BYTES)
        validate_text(self.category, field="category", max_bytes=CATEGORY_MAX_BYTES)
        validate_positive(self.target_amount, field="target_amount")
        validate_unsigned(self.current_amount, field="current_amount")
        validate_timestamp(self.target_date, field="target_date")
        validate_timestamp(self.created_at, field="created_at")
        validate_timestamp(self.updated_at, field="updated_at")

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def status(self) -> GoalStatus:
        """Current state in the goal state machine.

        Returns:
            GoalStatus: COMPLETED once completed, IN_PROGRESS otherwise.
        """
        return GoalStatus.COMPLETED if self.is_completed else GoalStatus.IN_PROGRESS

    @property
    def progress_percent(self) -> Decimal:
        """Progress as a percentage of the target (not capped at 100).

        Returns:
            Decimal: Percentage rounded to two places.

        Example:
            >>> goal.current_amount, goal.target_amount
            (250000, 1000000)
            >>> goal.progress_percent
            Decimal('25.00')
        """
        percent = Decimal(self.current_amount) * 100 / Decimal(self.target_amount)
        return percent.quantize(Decimal("0.01"))

    @property
    def remaining_amount(self) -> int:
        """Scaled amount still needed (zero once reached).

        Returns:
            int: max(0, target_amount - current_amount).
        """
        return max(0, self.target_amount - self.current_amount)

    def belongs_to(self, portfolio_address: Address) -> bool:
        """Check the back-reference.

        Args:
            portfolio_address: Portfolio the caller claims owns this goal.

        Returns:
            True if this goal references that portfolio.
        """
        return self.portfolio_address == portfolio_address

    # =========================================================================
    # Update Methods
    # =========================================================================

    def add_progress(self, amount: int, now: datetime) -> bool:
        """Accumulate progress and fire completion when the target is reached.

        Args:
            amount: Scaled amount to add.
            now: Operation timestamp.

        Returns:
            True if this call moved the goal from IN_PROGRESS to COMPLETED.

        Raises:
            FixedPointOverflowError: If current_amount would exceed 2**64 - 1.
                The goal is left untouched.
        """
        new_amount = checked_add(self.current_amount, amount, "current_amount")
        was_completed = self.is_completed

        self.current_amount = new_amount
        if self.current_amount >= self.target_amount:
            self.is_completed = True
        self.updated_at = now

        return self.is_completed and not was_completed
