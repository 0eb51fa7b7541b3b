"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
engine and session handling. Repositories receive a Database and open one
session per call; save_all opens one transaction per ledger operation.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides database sessions to repository implementations
- Handles transaction boundaries and connection pooling
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def _is_in_memory_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite") and (
        ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite:")
    )


class Database:
    """Database connection and session management.

    This class manages the database engine and provides sessions for
    database operations. It handles:
    - Connection pooling
    - Session lifecycle
    - Transaction management

    Usage:
        db = Database("sqlite+pysqlite:///ledger.db")
        db.create_all()
        with db.transaction() as session:
            session.add(model)
            # Commits on success, rolls back on error
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: SQLAlchemy URL (e.g. sqlite+pysqlite:///:memory:).
            echo: If True, log all SQL statements.

        Note:
            In-memory SQLite uses a single shared connection (StaticPool),
            otherwise every session would see its own empty database.
        """
        if _is_in_memory_sqlite(database_url):
            self.engine: Engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(
                database_url,
                echo=echo,
                pool_pre_ping=True,
            )

        self.session_factory = sessionmaker(
            self.engine,
            class_=Session,
            expire_on_commit=False,
        )

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Provide a database session.

        Commits on successful exit, rolls back on exception, always closes.

        Yields:
            Session: Database session for operations.
        """
        with self.session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    @contextmanager
    def transaction(self) -> Generator[Session, None, None]:
        """Provide an explicit transaction context.

        Every statement issued inside the block commits together or not at
        all.

        Yields:
            Session: Database session within a transaction.

        Example:
            with db.transaction() as session:
                session.add(asset_row)
                portfolio_row.payload = new_payload
                # Both writes commit together
        """
        with self.session_factory() as session, session.begin():
            yield session

    def create_all(self) -> None:
        """Create all tables defined in the models.

        The ledger has no migration tool; this is how stores are provisioned.
        """
        from portfolio_ledger.infrastructure.persistence import models  # noqa: F401
        from portfolio_ledger.infrastructure.persistence.base import BaseModel

        BaseModel.metadata.create_all(self.engine)

    def drop_all(self) -> None:
        """Drop all tables defined in the models.

        Warning: This will delete all data! Only use for testing.
        """
        from portfolio_ledger.infrastructure.persistence.base import BaseModel

        BaseModel.metadata.drop_all(self.engine)

    def close(self) -> None:
        """Close all database connections."""
        self.engine.dispose()

    def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise.
        """
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError:
            return False
