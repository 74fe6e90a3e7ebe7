"""Backup and restore domain service."""

from datetime import date
from pathlib import Path
from typing import Callable, Optional

from pledgebook.config import BACKUP_FILENAME_PREFIX
from pledgebook.database.mappers import dumps_document, loads_document
from pledgebook.domain.entities import Document
from pledgebook.domain.errors import MalformedBackupError, ValidationError
from pledgebook.domain.store import DocumentStore
from pledgebook.logging_utils import get_logger

LOGGER = get_logger(__name__)


class BackupService:
    """Service for exporting and restoring full-document snapshots."""

    def __init__(self, store: DocumentStore):
        """Initialize backup service.

        Args:
            store: Document store to snapshot and restore into
        """
        self.store = store

    def export_snapshot(self) -> str:
        """Serialize the current document as JSON text."""
        return dumps_document(self.store.document)

    def import_snapshot(self, raw: str) -> Document:
        """Parse and validate a snapshot without applying it.

        Args:
            raw: Snapshot text, as produced by ``export_snapshot``

        Returns:
            Candidate document for ``DocumentStore.replace``

        Raises:
            MalformedBackupError: If the text is not JSON, has no ``pledges``
                field, or holds records that cannot be typed
        """
        try:
            return loads_document(raw)
        except ValidationError as e:
            raise MalformedBackupError(f"Invalid backup file format: {e}") from e

    def restore(self, raw: str, confirm: Callable[[], bool]) -> bool:
        """Replace the whole document with a snapshot after confirmation.

        The snapshot is validated before ``confirm`` is asked. A declined
        confirmation or a malformed snapshot leaves the store untouched.

        Args:
            raw: Snapshot text
            confirm: Callback returning True to proceed with the replacement

        Returns:
            True if the snapshot was applied

        Raises:
            MalformedBackupError: If the snapshot is invalid
            StorageUnavailableError: If the restored document cannot be saved
        """
        candidate = self.import_snapshot(raw)
        if not confirm():
            LOGGER.info("Restore declined")
            return False
        self.store.replace(candidate)
        self.store.persist()
        LOGGER.info(
            "Restored backup with %d pledges, %d transactions, %d expenses",
            len(candidate.pledges),
            len(candidate.transactions),
            len(candidate.expenses),
        )
        return True

    def restore_file(self, path: str, confirm: Callable[[], bool]) -> bool:
        """Read a backup file and restore it. See ``restore``.

        Raises:
            MalformedBackupError: If the file cannot be decoded or is invalid
        """
        try:
            raw = Path(path).read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedBackupError(f"Invalid backup file format: {e}") from e
        return self.restore(raw, confirm)

    @staticmethod
    def backup_filename(today: Optional[date] = None) -> str:
        """Return the backup filename for a date (defaults to today)."""
        today = today or date.today()
        return f"{BACKUP_FILENAME_PREFIX}-{today.isoformat()}.json"

    def write_backup(self, directory: str = ".", today: Optional[date] = None) -> Path:
        """Write the current snapshot into directory.

        Returns:
            Path of the written file
        """
        path = Path(directory) / self.backup_filename(today)
        path.write_text(self.export_snapshot(), encoding="utf-8")
        LOGGER.info("Wrote backup to %s", path)
        return path
