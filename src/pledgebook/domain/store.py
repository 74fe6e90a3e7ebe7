"""Persistent document store."""

import dataclasses
import uuid
from typing import Callable, Optional, Union

from pledgebook.config import STORAGE_KEY
from pledgebook.database.base import Database
from pledgebook.database.mappers import dumps_document, loads_document
from pledgebook.domain.entities import Document, Expense, Pledge, Transaction
from pledgebook.domain.errors import (
    StorageUnavailableError,
    ValidationError,
    unknown_collection,
    wrong_record_type,
)
from pledgebook.logging_utils import get_logger

LOGGER = get_logger(__name__)

Record = Union[Pledge, Transaction, Expense]
Listener = Callable[[Document], None]

_COLLECTION_TYPES: dict[str, type] = {
    "pledges": Pledge,
    "transactions": Transaction,
    "expenses": Expense,
}


def _uuid_id() -> str:
    return uuid.uuid4().hex


class DocumentStore:
    """Owner of the single in-memory document and its persistence slot.

    Every mutation goes through this class. Readers get the live document via
    ``document`` and must not modify it.
    """

    def __init__(
        self,
        db: Database,
        key: str = STORAGE_KEY,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize document store.

        Args:
            db: Database instance holding the persistence slot
            key: Slot key
            id_factory: Callable returning a fresh unique id (defaults to UUID4 hex)
        """
        self.db = db
        self.key = key
        self._id_factory = id_factory or _uuid_id
        self._document = Document.empty()
        self._listeners: list[Listener] = []

    @property
    def document(self) -> Document:
        """The live document."""
        return self._document

    def new_id(self) -> str:
        """Return a fresh record id."""
        return self._id_factory()

    def subscribe(self, listener: Listener) -> None:
        """Register a callback run with the document after every save."""
        self._listeners.append(listener)

    def load(self) -> Document:
        """Load the document from the persistence slot.

        Missing, unreadable or corrupt data yields an empty document; the
        problem is logged and never raised.

        Returns:
            The loaded document
        """
        try:
            raw = self.db.read_slot(self.key)
        except StorageUnavailableError as e:
            LOGGER.warning("Load failed, starting with an empty document: %s", e)
            self._document = Document.empty()
            return self._document

        if raw is None:
            self._document = Document.empty()
            return self._document

        try:
            self._document = loads_document(raw)
        except ValidationError as e:
            LOGGER.warning("Stored document is corrupt, starting with an empty document: %s", e)
            self._document = Document.empty()
        else:
            LOGGER.debug(
                "Loaded %d pledges, %d transactions, %d expenses",
                len(self._document.pledges),
                len(self._document.transactions),
                len(self._document.expenses),
            )
        return self._document

    def replace(self, document: Document) -> None:
        """Swap the entire in-memory document.

        Callers validate the document beforehand and call ``persist`` after.
        """
        self._document = document
        LOGGER.info("Document replaced")

    def append(self, collection: str, record: Record) -> Record:
        """Add one record to a collection.

        Args:
            collection: One of "pledges", "transactions", "expenses"
            record: Entity to add; an empty id is replaced with a fresh one

        Returns:
            The record as stored

        Raises:
            ValidationError: If the collection is unknown or the record type
                does not match it
        """
        expected_type = _COLLECTION_TYPES.get(collection)
        if expected_type is None:
            raise ValidationError(unknown_collection(collection))
        if not isinstance(record, expected_type):
            raise ValidationError(wrong_record_type(collection, record))

        if not record.id:
            record = dataclasses.replace(record, id=self.new_id())

        getattr(self._document, collection).append(record)
        return record

    def persist(self) -> None:
        """Write the whole document to the slot, then notify listeners.

        Raises:
            StorageUnavailableError: If the slot cannot be written
        """
        self.db.write_slot(self.key, dumps_document(self._document))
        LOGGER.info("Document saved")
        self._notify()

    def clear(self) -> None:
        """Erase the slot and reset to an empty document. Irreversible.

        Raises:
            StorageUnavailableError: If the slot cannot be erased
        """
        self.db.delete_slot(self.key)
        self._document = Document.empty()
        LOGGER.info("Document cleared")
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self._document)
