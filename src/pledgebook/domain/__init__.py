"""Domain layer for pledgebook application."""

from pledgebook.domain.store import DocumentStore
from pledgebook.domain.reporting import ReportingService
from pledgebook.domain.backup import BackupService
from pledgebook.domain.csv_import import CSVImportService
from pledgebook.domain.records import RecordService

__all__ = [
    "DocumentStore",
    "ReportingService",
    "BackupService",
    "CSVImportService",
    "RecordService",
]
