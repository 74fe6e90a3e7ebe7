"""Tests for document mappers."""

import pytest

from pledgebook.database.mappers import (
    document_to_payload,
    dumps_document,
    expense_to_domain,
    loads_document,
    payload_to_document,
    pledge_to_domain,
    transaction_to_domain,
    transaction_to_payload,
)
from pledgebook.domain.entities import Document, Pledge, Transaction
from pledgebook.domain.errors import ValidationError


class TestPledgeMapper:
    """Tests for Pledge mapper."""

    def test_pledge_to_domain(self):
        """Stored pledge records become Pledge entities."""
        pledge = pledge_to_domain({"id": "p1", "name": "Jane", "department": "Youth", "amount": 10})

        assert pledge == Pledge(id="p1", name="Jane", department="Youth", amount=10.0)
        assert isinstance(pledge.amount, float)

    def test_numeric_id_becomes_text(self):
        """Numeric ids are normalized to strings."""
        pledge = pledge_to_domain({"id": 1717, "name": "Jane", "department": "Youth", "amount": 1})

        assert pledge.id == "1717"

    def test_missing_text_fields_read_as_blank(self):
        """Missing name or department loads as an empty string."""
        pledge = pledge_to_domain({"id": "p1", "amount": 1})

        assert pledge.name == ""
        assert pledge.department == ""

    def test_missing_id_rejected(self):
        """Ids must be present."""
        with pytest.raises(ValidationError):
            pledge_to_domain({"name": "Jane", "department": "Youth", "amount": 1})

    def test_missing_amount_rejected(self):
        """Amounts must be present."""
        with pytest.raises(ValidationError):
            pledge_to_domain({"id": "p1", "name": "Jane", "department": "Youth"})

    def test_boolean_amount_rejected(self):
        """Booleans are not amounts."""
        with pytest.raises(ValidationError):
            pledge_to_domain({"id": "p1", "name": "Jane", "department": "Youth", "amount": True})


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_pledge_link_round_trip(self):
        """pledgeId maps to pledge_id and back."""
        record = {
            "id": "t1",
            "name": "Jane",
            "department": "Youth",
            "amount": 5.0,
            "date": "2024-01-01",
            "pledgeId": "p1",
        }

        transaction = transaction_to_domain(record)

        assert transaction.pledge_id == "p1"
        assert transaction_to_payload(transaction) == record

    def test_missing_date_is_blank(self):
        """A missing date is kept as an empty string."""
        transaction = transaction_to_domain(
            {"id": "t1", "name": "Jane", "department": "Youth", "amount": 5.0}
        )

        assert transaction.date == ""
        assert transaction.pledge_id is None

    def test_general_donation_omits_pledge_id(self):
        """Unlinked transactions serialize without pledgeId."""
        transaction = Transaction(
            id="t1", name="Jane", department="Youth", amount=5.0, date="2024-01-01"
        )

        assert "pledgeId" not in transaction_to_payload(transaction)


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Stored expenses become Expense entities."""
        expense = expense_to_domain(
            {"id": "e1", "description": "Tents", "amount": "12.5", "date": "2024-01-01"}
        )

        assert expense.description == "Tents"
        assert expense.amount == 12.5


class TestDocumentMapper:
    """Tests for whole-document mapping."""

    def test_payload_must_be_object(self):
        """Non-object payloads are rejected."""
        with pytest.raises(ValidationError):
            payload_to_document(["pledges"])

    def test_pledges_field_required(self):
        """The pledges field is the minimal shape check."""
        with pytest.raises(ValidationError):
            payload_to_document({"transactions": []})

    def test_null_pledges_rejected(self):
        """A null pledges field counts as missing."""
        with pytest.raises(ValidationError):
            payload_to_document({"pledges": None, "transactions": []})

    def test_transaction_without_name_loads(self):
        """One record missing a text field does not reject the document."""
        document = payload_to_document(
            {
                "pledges": [{"id": "p1", "name": "Jane", "amount": 5}],
                "transactions": [{"id": "t1", "department": "Youth", "amount": 5}],
            }
        )

        assert document.pledges[0].department == ""
        assert document.transactions[0].name == ""

    def test_dumps_loads(self):
        """Serialized documents parse back equal."""
        document = Document(
            pledges=[Pledge(id="p1", name="Jane", department="Youth", amount=1.0)]
        )

        assert loads_document(dumps_document(document)) == document
        assert document_to_payload(document)["expenses"] == []

    def test_loads_invalid_json(self):
        """Invalid JSON raises ValidationError."""
        with pytest.raises(ValidationError):
            loads_document("{")
