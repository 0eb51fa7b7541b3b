"""Financial goal lifecycle states.

State Machine:
    IN_PROGRESS → COMPLETED (terminal)

    - IN_PROGRESS: current_amount < target_amount
    - COMPLETED: current_amount reached target_amount at some point

Usage:
    from portfolio_ledger.domain.enums import GoalStatus

    if goal.status == GoalStatus.COMPLETED:
        ...
"""

from enum import Enum


class GoalStatus(str, Enum):
    """Financial goal lifecycle states.

    String Enum:
        Inherits from str for easy serialization and logging.

    State Transitions:
        IN_PROGRESS → COMPLETED: Progress reaches the target amount
        COMPLETED is terminal; no operation leaves it.
    """

    IN_PROGRESS = "in_progress"
    """Initial state; target not yet reached."""

    COMPLETED = "completed"
    """Target reached. Terminal."""
