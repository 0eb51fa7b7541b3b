"""Domain ports (structural protocols implemented by infrastructure)."""

from portfolio_ledger.domain.protocols.address_deriver_protocol import (
    AddressDeriverProtocol,
)
from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
from portfolio_ledger.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from portfolio_ledger.domain.protocols.ledger_repository import (
    LedgerRecord,
    LedgerRepository,
    RecordExistsError,
    RecordMissingError,
)
from portfolio_ledger.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AddressDeriverProtocol",
    "ClockProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LedgerRecord",
    "LedgerRepository",
    "LoggerProtocol",
    "RecordExistsError",
    "RecordMissingError",
]
