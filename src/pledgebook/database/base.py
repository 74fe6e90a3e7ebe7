"""Abstract persistence slot interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Database(ABC):
    """Abstract key-value persistence interface for pledgebook.

    Each key names one slot holding a whole serialized document. Slots are
    only ever read, overwritten or deleted wholesale.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def read_slot(self, key: str) -> Optional[str]:
        """Return the text stored under key, or None if the slot is empty."""
        pass

    @abstractmethod
    def write_slot(self, key: str, value: str) -> None:
        """Overwrite the slot under key with value."""
        pass

    @abstractmethod
    def delete_slot(self, key: str) -> None:
        """Erase the slot under key. Erasing an empty slot is a no-op."""
        pass
