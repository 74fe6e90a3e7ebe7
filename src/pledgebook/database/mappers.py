"""Mapper functions to convert between domain entities and the stored document.

The persistence slot and backup files hold one JSON object with the keys
``pledges``, ``transactions`` and ``expenses``. Records are typed here, at the
parse boundary, so nothing past this module sees untyped data.
"""

import json
import math
from typing import Any, Optional

from pledgebook.domain import entities as domain
from pledgebook.domain.errors import ValidationError

COLLECTIONS = ("pledges", "transactions", "expenses")


def _record_id(record: dict[str, Any], key: str = "id") -> str:
    value = record.get(key)
    if value is None or isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationError(f"Record has no usable '{key}': {record!r}")
    return str(value)


def _optional_id(record: dict[str, Any], key: str) -> Optional[str]:
    if record.get(key) is None:
        return None
    return _record_id(record, key)


def _text(record: dict[str, Any], key: str) -> str:
    """Read a text field; a missing or null field reads as an empty string."""
    value = record.get(key)
    if value is None:
        return ""
    return str(value)


def _amount(record: dict[str, Any]) -> float:
    """Read an amount; null (a NaN written by an older client) counts as zero."""
    if "amount" not in record:
        raise ValidationError(f"Record is missing 'amount': {record!r}")
    value = record["amount"]
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ValidationError(f"Amount must be numeric: {value!r}")
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Amount must be numeric: {value!r}") from e
    if math.isnan(amount):
        return 0.0
    return amount


def _record_list(payload: dict[str, Any], collection: str) -> list[dict[str, Any]]:
    records = payload.get(collection)
    if records is None:
        return []
    if not isinstance(records, list):
        raise ValidationError(f"'{collection}' must be a list")
    for record in records:
        if not isinstance(record, dict):
            raise ValidationError(f"'{collection}' entries must be objects: {record!r}")
    return records


def pledge_to_domain(record: dict[str, Any]) -> domain.Pledge:
    """Convert a stored pledge record to a Pledge entity."""
    return domain.Pledge(
        id=_record_id(record),
        name=_text(record, "name"),
        department=_text(record, "department"),
        amount=_amount(record),
    )


def transaction_to_domain(record: dict[str, Any]) -> domain.Transaction:
    """Convert a stored transaction record to a Transaction entity."""
    return domain.Transaction(
        id=_record_id(record),
        name=_text(record, "name"),
        department=_text(record, "department"),
        amount=_amount(record),
        date=_text(record, "date"),
        pledge_id=_optional_id(record, "pledgeId"),
    )


def expense_to_domain(record: dict[str, Any]) -> domain.Expense:
    """Convert a stored expense record to an Expense entity."""
    return domain.Expense(
        id=_record_id(record),
        description=_text(record, "description"),
        amount=_amount(record),
        date=_text(record, "date"),
    )


def pledge_to_payload(pledge: domain.Pledge) -> dict[str, Any]:
    """Convert a Pledge entity to its stored record."""
    return {
        "id": pledge.id,
        "name": pledge.name,
        "department": pledge.department,
        "amount": pledge.amount,
    }


def transaction_to_payload(transaction: domain.Transaction) -> dict[str, Any]:
    """Convert a Transaction entity to its stored record."""
    payload: dict[str, Any] = {
        "id": transaction.id,
        "name": transaction.name,
        "department": transaction.department,
        "amount": transaction.amount,
        "date": transaction.date,
    }
    if transaction.pledge_id is not None:
        payload["pledgeId"] = transaction.pledge_id
    return payload


def expense_to_payload(expense: domain.Expense) -> dict[str, Any]:
    """Convert an Expense entity to its stored record."""
    return {
        "id": expense.id,
        "description": expense.description,
        "amount": expense.amount,
        "date": expense.date,
    }


def payload_to_document(payload: Any) -> domain.Document:
    """Convert a decoded JSON value to a Document.

    Args:
        payload: Result of ``json.loads`` on a stored document

    Returns:
        Document with typed records

    Raises:
        ValidationError: If the payload is not an object, has a missing or
            null ``pledges`` field, or holds records that cannot be typed
    """
    if not isinstance(payload, dict):
        raise ValidationError("Document must be a JSON object")
    if payload.get("pledges") is None:
        raise ValidationError("Document has no 'pledges' field")

    return domain.Document(
        pledges=[pledge_to_domain(r) for r in _record_list(payload, "pledges")],
        transactions=[
            transaction_to_domain(r) for r in _record_list(payload, "transactions")
        ],
        expenses=[expense_to_domain(r) for r in _record_list(payload, "expenses")],
    )


def document_to_payload(document: domain.Document) -> dict[str, Any]:
    """Convert a Document to a JSON-serializable dict."""
    return {
        "pledges": [pledge_to_payload(p) for p in document.pledges],
        "transactions": [transaction_to_payload(t) for t in document.transactions],
        "expenses": [expense_to_payload(e) for e in document.expenses],
    }


def dumps_document(document: domain.Document) -> str:
    """Serialize a Document to JSON text."""
    return json.dumps(document_to_payload(document), ensure_ascii=False)


def loads_document(raw: str) -> domain.Document:
    """Parse JSON text into a Document.

    Raises:
        ValidationError: If the text is not valid JSON or fails the shape check
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ValidationError(f"Document is not valid JSON: {e}") from e
    return payload_to_document(payload)
