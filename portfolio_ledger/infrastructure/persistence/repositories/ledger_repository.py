"""SqlAlchemyLedgerRepository - SQLAlchemy implementation of LedgerRepository.

Adapter for hexagonal architecture.
Maps between domain ledger entities and LedgerRecordModel rows using the
fixed record layouts.
"""

from collections.abc import Sequence
from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from portfolio_ledger.domain.entities import (
    CryptoAsset,
    FinancialGoal,
    Portfolio,
    TransactionRecord,
)
from portfolio_ledger.domain.enums.record_kind import RecordKind
from portfolio_ledger.domain.protocols.ledger_repository import (
    LedgerRecord,
    RecordExistsError,
    RecordMissingError,
)
from portfolio_ledger.domain.value_objects.address import Address
from portfolio_ledger.infrastructure.persistence.database import Database
from portfolio_ledger.infrastructure.persistence.models.ledger_record import (
    LedgerRecordModel,
)
from portfolio_ledger.infrastructure.persistence.record_layout import (
    LAYOUTS_BY_KIND,
    encode_record,
)


class SqlAlchemyLedgerRepository:
    """SQLAlchemy implementation of the LedgerRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural
    typing).

    Reads open a short-lived session each; save_all runs inside a single
    transaction so one ledger operation is all-or-nothing.

    Attributes:
        _database: Database providing sessions and transactions.

    Example:
        >>> repo = SqlAlchemyLedgerRepository(database)
        >>> repo.save_all(created=[asset], updated=[portfolio])
        >>> repo.list_assets(portfolio.address)
        [CryptoAsset(...)]
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with database.

        Args:
            database: Database connection manager.
        """
        self._database = database

    # =========================================================================
    # Reads
    # =========================================================================

    def exists(self, address: Address) -> bool:
        """Check whether any record lives at address.

        Args:
            address: Record address.

        Returns:
            True if occupied (by any kind).
        """
        with self._database.get_session() as session:
            return self._find_model(session, address) is not None

    def find_portfolio(self, address: Address) -> Portfolio | None:
        """Find portfolio by address.

        Args:
            address: Portfolio address.

        Returns:
            Portfolio if found, None otherwise (also when the address holds
            another kind).
        """
        return cast(
            Portfolio | None, self._find_kind(address, RecordKind.PORTFOLIO)
        )

    def find_asset(self, address: Address) -> CryptoAsset | None:
        """Find crypto asset by address.

        Args:
            address: Asset address.

        Returns:
            CryptoAsset if found, None otherwise.
        """
        return cast(
            CryptoAsset | None, self._find_kind(address, RecordKind.CRYPTO_ASSET)
        )

    def find_transaction(self, address: Address) -> TransactionRecord | None:
        """Find transaction record by address.

        Args:
            address: Record address.

        Returns:
            TransactionRecord if found, None otherwise.
        """
        return cast(
            TransactionRecord | None,
            self._find_kind(address, RecordKind.TRANSACTION_RECORD),
        )

    def find_goal(self, address: Address) -> FinancialGoal | None:
        """Find financial goal by address.

        Args:
            address: Goal address.

        Returns:
            FinancialGoal if found, None otherwise.
        """
        return cast(
            FinancialGoal | None,
            self._find_kind(address, RecordKind.FINANCIAL_GOAL),
        )

    def list_assets(self, portfolio_address: Address) -> list[CryptoAsset]:
        """List assets referencing a portfolio, in creation order.

        Args:
            portfolio_address: Owning portfolio.

        Returns:
            List of assets (empty if none).
        """
        return self._list_kind(portfolio_address, RecordKind.CRYPTO_ASSET)

    def list_transactions(
        self, portfolio_address: Address
    ) -> list[TransactionRecord]:
        """List transaction records referencing a portfolio, in creation order.

        Args:
            portfolio_address: Owning portfolio.

        Returns:
            List of records (empty if none).
        """
        return self._list_kind(portfolio_address, RecordKind.TRANSACTION_RECORD)

    def list_goals(self, portfolio_address: Address) -> list[FinancialGoal]:
        """List goals referencing a portfolio, in creation order.

        Args:
            portfolio_address: Owning portfolio.

        Returns:
            List of goals (empty if none).
        """
        return self._list_kind(portfolio_address, RecordKind.FINANCIAL_GOAL)

    # =========================================================================
    # Writes
    # =========================================================================

    def save_all(
        self,
        *,
        created: Sequence[LedgerRecord] = (),
        updated: Sequence[LedgerRecord] = (),
    ) -> None:
        """Persist one operation's records in a single transaction.

        All payloads are encoded before the transaction opens, so a layout
        error never reaches the database.

        Args:
            created: Records that must not exist yet.
            updated: Records that must already exist.

        Raises:
            RecordExistsError: A created record's address is occupied.
            RecordMissingError: An updated record does not exist.
            RecordLayoutError: A record does not fit its fixed layout.
            SQLAlchemyError: Storage failure (transaction rolled back).
        """
        new_rows = [self._to_model(record) for record in created]
        changes = [(record.address, encode_record(record)) for record in updated]

        with self._database.transaction() as session:
            for row in new_rows:
                address = Address(row.address)
                if self._find_model(session, address) is not None:
                    raise RecordExistsError(address)
                session.add(row)
                # Flush per row so the insertion sequence follows `created` order
                session.flush()

            for address, (kind, payload) in changes:
                model = self._find_model(session, address)
                if model is None or model.kind != kind.value:
                    raise RecordMissingError(address)
                model.payload = payload

    # =========================================================================
    # Mapping
    # =========================================================================

    @staticmethod
    def _find_model(session: Session, address: Address) -> LedgerRecordModel | None:
        stmt = select(LedgerRecordModel).where(
            LedgerRecordModel.address == address.value
        )
        return session.execute(stmt).scalar_one_or_none()

    def _find_kind(self, address: Address, kind: RecordKind) -> LedgerRecord | None:
        with self._database.get_session() as session:
            model = self._find_model(session, address)
            if model is None or model.kind != kind.value:
                return None
            return self._to_domain(model)

    def _list_kind(
        self, portfolio_address: Address, kind: RecordKind
    ) -> list[Any]:
        stmt = (
            select(LedgerRecordModel)
            .where(
                LedgerRecordModel.portfolio_address == portfolio_address.value,
                LedgerRecordModel.kind == kind.value,
            )
            .order_by(LedgerRecordModel.id)
        )
        with self._database.get_session() as session:
            models = session.execute(stmt).scalars().all()
            return [self._to_domain(model) for model in models]

    @staticmethod
    def _to_domain(model: LedgerRecordModel) -> LedgerRecord:
        """Convert database model to domain entity.

        Args:
            model: Stored row.

        Returns:
            Decoded entity.

        Raises:
            RecordLayoutError: If the payload does not match the row's kind.
        """
        return LAYOUTS_BY_KIND[RecordKind(model.kind)].decode(model.payload)

    @staticmethod
    def _to_model(record: LedgerRecord) -> LedgerRecordModel:
        """Convert domain entity to a new database row.

        Args:
            record: Entity to store.

        Returns:
            Unsaved LedgerRecordModel.

        Raises:
            RecordLayoutError: If the record does not fit its layout.
        """
        kind, payload = encode_record(record)
        portfolio_address = (
            None if isinstance(record, Portfolio) else record.portfolio_address.value
        )
        return LedgerRecordModel(
            address=record.address.value,
            kind=kind.value,
            portfolio_address=portfolio_address,
            payload=payload,
        )
