"""Tests for backup export and restore."""

import json
from datetime import date

import pytest

from pledgebook.domain.entities import Document, Expense, Pledge, Transaction
from pledgebook.domain.errors import MalformedBackupError
from pledgebook.domain.store import DocumentStore


def _populate(store):
    store.append("pledges", Pledge(id="p1", name="Jane", department="Youth", amount=100.0))
    store.append("pledges", Pledge(id="p2", name="Peter", department="Eagles", amount=0.0))
    store.append(
        "transactions",
        Transaction(
            id="t1",
            name="Jane",
            department="Youth",
            amount=60.0,
            date="2024-01-02T09:00:00.000Z",
            pledge_id="p1",
        ),
    )
    store.append(
        "transactions",
        Transaction(id="t2", name="Guest", department="Guests", amount=5.5, date="2024-01-03"),
    )
    store.append("expenses", Expense(id="e1", description="Tents", amount=20.0, date="2024-01-04"))


def test_export_snapshot_is_json_with_all_collections(store, backup_service):
    """The snapshot is a JSON object with the three collections."""
    _populate(store)

    payload = json.loads(backup_service.export_snapshot())

    assert set(payload) == {"pledges", "transactions", "expenses"}
    assert payload["transactions"][0]["pledgeId"] == "p1"
    assert "pledgeId" not in payload["transactions"][1]


def test_round_trip_reproduces_document(store, backup_service, temp_db):
    """import(export()) applied with replace gives an equal document."""
    _populate(store)
    original = Document(
        pledges=list(store.document.pledges),
        transactions=list(store.document.transactions),
        expenses=list(store.document.expenses),
    )

    candidate = backup_service.import_snapshot(backup_service.export_snapshot())
    other_store = DocumentStore(temp_db)
    other_store.replace(candidate)

    assert other_store.document == original


def test_import_snapshot_without_pledges_fails(store, backup_service):
    """A snapshot without a pledges field is rejected and nothing changes."""
    _populate(store)
    before = store.document

    with pytest.raises(MalformedBackupError):
        backup_service.import_snapshot("{}")

    assert store.document is before
    assert len(store.document.pledges) == 2


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "[]",
        '{"pledges": null}',
        '{"pledges": {}}',
        '{"pledges": [{"name": "No id", "department": "Youth", "amount": 1}]}',
        '{"pledges": [{"id": 1, "name": "Jane", "department": "Youth", "amount": "lots"}]}',
    ],
)
def test_import_snapshot_rejects_malformed_input(backup_service, raw):
    """Unparsable or mis-shaped snapshots raise MalformedBackupError."""
    with pytest.raises(MalformedBackupError):
        backup_service.import_snapshot(raw)


def test_import_snapshot_defaults_missing_collections(backup_service):
    """Only pledges is required; other collections default to empty."""
    document = backup_service.import_snapshot('{"pledges": []}')

    assert document == Document.empty()


def test_import_legacy_backup_normalizes_ids(backup_service, fixtures_dir):
    """Numeric ids from older backups become strings, links intact."""
    raw = (fixtures_dir / "legacy_backup.json").read_text(encoding="utf-8")

    document = backup_service.import_snapshot(raw)

    assert document.pledges[0].id == "1717000000001"
    assert document.transactions[0].pledge_id == "1717000000001"
    assert document.transactions[1].pledge_id is None
    # null amounts (NaN in the old client) count as zero
    assert document.transactions[1].amount == 0.0
    assert document.expenses[0].id == "exp-1"


def test_restore_applies_after_confirmation(temp_db, store, backup_service, fixtures_dir):
    """A confirmed restore replaces and persists the document."""
    _populate(store)
    raw = (fixtures_dir / "legacy_backup.json").read_text(encoding="utf-8")

    applied = backup_service.restore(raw, confirm=lambda: True)

    assert applied is True
    assert [p.name for p in store.document.pledges] == ["Jane Wanjiru", "Peter Otieno"]
    reloaded = DocumentStore(temp_db)
    reloaded.load()
    assert reloaded.document == store.document


def test_restore_declined_leaves_document(store, backup_service, fixtures_dir):
    """Declining confirmation changes nothing."""
    _populate(store)
    before = store.document
    raw = (fixtures_dir / "legacy_backup.json").read_text(encoding="utf-8")

    applied = backup_service.restore(raw, confirm=lambda: False)

    assert applied is False
    assert store.document is before


def test_restore_malformed_never_asks(store, backup_service):
    """Validation happens before confirmation is requested."""
    asked = []

    with pytest.raises(MalformedBackupError):
        backup_service.restore("{}", confirm=lambda: asked.append(True) or True)

    assert asked == []


def test_backup_filename_embeds_date():
    """Backup filenames carry the ISO date."""
    from pledgebook.domain.backup import BackupService

    assert BackupService.backup_filename(date(2024, 6, 30)) == "pledgebook-backup-2024-06-30.json"


def test_write_backup_creates_file(store, backup_service, tmp_path):
    """write_backup writes the snapshot into the directory."""
    _populate(store)

    path = backup_service.write_backup(str(tmp_path), today=date(2024, 7, 1))

    assert path == tmp_path / "pledgebook-backup-2024-07-01.json"
    assert backup_service.import_snapshot(path.read_text(encoding="utf-8")) == store.document
