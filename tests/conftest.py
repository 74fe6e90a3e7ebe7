"""Shared pytest fixtures for pledgebook tests."""

import itertools
import tempfile
import os
from pathlib import Path
import pytest

from pledgebook.database.factories import create_sqlite_database
from pledgebook.domain.backup import BackupService
from pledgebook.domain.csv_import import CSVImportService
from pledgebook.domain.records import RecordService
from pledgebook.domain.reporting import ReportingService
from pledgebook.domain.store import DocumentStore


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def id_factory():
    """Deterministic id generator: id-0001, id-0002, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def store(temp_db, id_factory):
    """Create a loaded DocumentStore over the temporary database."""
    document_store = DocumentStore(temp_db, id_factory=id_factory)
    document_store.load()
    return document_store


@pytest.fixture
def reporting_service(store):
    """Create a ReportingService reading the test store."""
    return ReportingService(store)


@pytest.fixture
def record_service(store):
    """Create a RecordService writing to the test store."""
    return RecordService(store)


@pytest.fixture
def backup_service(store):
    """Create a BackupService over the test store."""
    return BackupService(store)


@pytest.fixture
def csv_import_service(store):
    """Create a CSVImportService writing to the test store."""
    return CSVImportService(store)


@pytest.fixture
def sample_pledge(record_service):
    """Create a sample pledge for testing."""
    return record_service.add_pledge(name="Jane Wanjiru", department="Youth", amount=100.0)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
