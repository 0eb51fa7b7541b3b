"""Base domain event class.

Domain events represent things that happened in the ledger and are named in
past tense (PortfolioInitialized, AssetAdded, GoalCompleted).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class AssetAdded(DomainEvent):
    ...     portfolio_address: str
    ...     symbol: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: When the event was emitted (UTC). Handlers pass the
            operation timestamp from the injected clock.
    """

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""
