"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (SQLAlchemy ledger record store)
- Clock (system UTC clock)
- Address derivation (SHA-256)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from portfolio_ledger.core.config import settings
from portfolio_ledger.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from portfolio_ledger.domain.protocols.address_deriver_protocol import (
        AddressDeriverProtocol,
    )
    from portfolio_ledger.domain.protocols.clock_protocol import ClockProtocol
    from portfolio_ledger.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from portfolio_ledger.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=level,
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Tables are created on first use; the ledger store has no migration
    tool.

    Returns:
        Database manager instance.

    Usage:
        db = get_database()
        assert db.check_connection()
    """
    database = Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )
    database.create_all()
    return database


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get clock singleton (app-scoped).

    Returns:
        SystemClock implementing ClockProtocol.
    """
    from portfolio_ledger.infrastructure.time.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_address_deriver() -> "AddressDeriverProtocol":
    """Get address deriver singleton (app-scoped).

    Returns:
        Sha256AddressDeriver implementing AddressDeriverProtocol.
    """
    from portfolio_ledger.infrastructure.addressing.sha256_address_deriver import (
        Sha256AddressDeriver,
    )

    return Sha256AddressDeriver()
