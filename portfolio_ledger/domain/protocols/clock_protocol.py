"""Clock protocol.

Ledger operations never read the wall clock directly; handlers receive a
clock so timestamps are deterministic under test.

Implementations:
    - SystemClock: portfolio_ledger/infrastructure/time/system_clock.py
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of operation timestamps."""

    def now(self) -> datetime:
        """Return the current timestamp.

        Returns:
            Timezone-aware datetime.
        """
        ...
