import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from playerstats.utils.clock import local_now

from .models import Base, StoredPlayer

logger = logging.getLogger(__name__)


class Database:
    """Persistence adapter for stored player statistics."""

    def __init__(self, dsn: str) -> None:
        """
        Initialize database connection.

        Args:
            dsn: Database connection string
        """
        self.engine = create_engine(dsn, echo=False)
        self.session_factory = sessionmaker(self.engine, expire_on_commit=False, class_=Session)
        logger.info("Database engine initialized")

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> "Database":
        """Build a database from settings returned by ``load_settings``."""
        return cls(settings["database"]["dsn"])

    def connect(self) -> None:
        """Create tables if they don't exist."""
        try:
            Base.metadata.create_all(self.engine)
            logger.info("Database tables created/verified")
        except SQLAlchemyError as e:
            logger.error(f"Database connection error: {e}")
            raise

    def close(self) -> None:
        """Close database connection."""
        try:
            self.engine.dispose()
            logger.info("Database connection closed")
        except SQLAlchemyError as e:
            logger.error(f"Error closing database: {e}")

    @contextmanager
    def session_scope(self) -> Generator[Session]:
        """
        Provide a transactional scope around a series of operations.

        Yields:
            Session: Database session object

        Raises:
            SQLAlchemyError: If database operation fails
        """
        with self.session_factory() as session:
            try:
                yield session
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Database transaction error: {e}")
                raise

    def save_user(self, record: StoredPlayer) -> None:
        """
        Insert or update a stored player record.

        Args:
            record: Record to persist

        Raises:
            SQLAlchemyError: If the write fails
        """
        with self.session_scope() as session:
            session.add(record)
        logger.info(f"Saved stats for {record.name}")

    def get_user(self, name: str) -> StoredPlayer | None:
        """
        Retrieve a stored player by name, ignoring case.

        Args:
            name: Player name

        Returns:
            Stored record or None if not found
        """
        try:
            with self.session_scope() as session:
                result = session.execute(select(StoredPlayer).where(func.lower(StoredPlayer.name) == name.lower()))
                return result.scalars().first()

        except SQLAlchemyError as e:
            logger.error(f"Get user error: {e}", exc_info=True)
            return None

    def get_or_create_user(self, name: str) -> StoredPlayer:
        """
        Load a player's record, creating it on first login.

        Args:
            name: Player name

        Returns:
            Existing or freshly persisted record
        """
        record = self.get_user(name)
        if record:
            return record

        record = StoredPlayer(name=name, first_login=local_now())
        self.save_user(record)
        logger.info(f"Created new record for {name}")
        return record
