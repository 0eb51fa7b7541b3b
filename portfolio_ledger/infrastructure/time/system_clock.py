"""System clock adapter (UTC wall clock)."""

from datetime import UTC, datetime


class SystemClock:
    """Clock backed by datetime.now(UTC).

    Implements ClockProtocol. Tests inject a fixed clock instead.
    """

    def now(self) -> datetime:
        """Return the current UTC time.

        Returns:
            Timezone-aware UTC datetime.
        """
        return datetime.now(UTC)
