"""Generic SQLAlchemy database implementation."""

from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pledgebook.database.base import Database
from pledgebook.database.models import StorageSlot, create_session_factory
from pledgebook.domain.errors import StorageUnavailableError


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')

        Raises:
            StorageUnavailableError: If the database cannot be opened
        """
        self.database_url = database_url
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Cannot open storage at {database_url}: {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def read_slot(self, key: str) -> Optional[str]:
        """Return the text stored under key, or None if the slot is empty."""
        session = self._get_session()
        try:
            slot = session.query(StorageSlot).filter(StorageSlot.key == key).first()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageUnavailableError(f"Cannot read storage slot '{key}': {e}") from e
        if slot is None:
            return None
        return slot.value

    def write_slot(self, key: str, value: str) -> None:
        """Overwrite the slot under key with value."""
        session = self._get_session()
        try:
            slot = session.query(StorageSlot).filter(StorageSlot.key == key).first()
            if slot is None:
                session.add(StorageSlot(key=key, value=value))
            else:
                slot.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageUnavailableError(f"Cannot write storage slot '{key}': {e}") from e

    def delete_slot(self, key: str) -> None:
        """Erase the slot under key. Erasing an empty slot is a no-op."""
        session = self._get_session()
        try:
            session.query(StorageSlot).filter(StorageSlot.key == key).delete()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageUnavailableError(f"Cannot erase storage slot '{key}': {e}") from e
