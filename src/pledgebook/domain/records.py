"""Record entry domain service."""

from datetime import date
from typing import Optional

from pledgebook.domain.entities import Expense, Pledge, Transaction
from pledgebook.domain.errors import (
    NotFoundError,
    ValidationError,
    blank_field,
    pledge_not_found,
)
from pledgebook.domain.store import DocumentStore
from pledgebook.utils.date_parser import date_to_timestamp, utc_timestamp


class RecordService:
    """Service for entering pledges, cash receipts and expenses."""

    def __init__(self, store: DocumentStore):
        """Initialize record service.

        Args:
            store: Document store receiving new records
        """
        self.store = store

    def get_pledge(self, pledge_id: str) -> Optional[Pledge]:
        """Get pledge by ID.

        Args:
            pledge_id: Pledge ID

        Returns:
            Pledge entity or None if not found
        """
        for pledge in self.store.document.pledges:
            if pledge.id == pledge_id:
                return pledge
        return None

    def add_pledge(self, name: str, department: str, amount: float) -> Pledge:
        """Record a new pledge and save.

        Args:
            name: Donor name
            department: Department credited with the pledge
            amount: Pledged total

        Returns:
            The stored pledge

        Raises:
            ValidationError: If name is blank
            StorageUnavailableError: If the document cannot be saved
        """
        name = _require_text(name, "Name")
        pledge = self.store.append(
            "pledges",
            Pledge(id=self.store.new_id(), name=name, department=department, amount=amount),
        )
        self.store.persist()
        return pledge

    def record_cash(
        self,
        name: Optional[str],
        department: Optional[str],
        amount: float,
        on_date: Optional[date] = None,
        pledge_id: Optional[str] = None,
    ) -> Transaction:
        """Record cash received and save.

        When linked to a pledge, a blank name or department is taken from
        the pledge.

        Args:
            name: Payer name
            department: Department credited with the cash
            amount: Amount received
            on_date: Date received (defaults to now)
            pledge_id: Optional pledge the payment counts towards

        Returns:
            The stored transaction

        Raises:
            NotFoundError: If pledge_id does not name a pledge
            ValidationError: If name or department is blank and no pledge supplies it
            StorageUnavailableError: If the document cannot be saved
        """
        if pledge_id is not None:
            pledge = self.get_pledge(pledge_id)
            if pledge is None:
                raise NotFoundError(pledge_not_found(pledge_id))
            name = name if name and name.strip() else pledge.name
            department = department if department and department.strip() else pledge.department

        transaction = Transaction(
            id=self.store.new_id(),
            name=_require_text(name, "Name"),
            department=_require_text(department, "Department"),
            amount=amount,
            date=date_to_timestamp(on_date) if on_date is not None else utc_timestamp(),
            pledge_id=pledge_id,
        )
        transaction = self.store.append("transactions", transaction)
        self.store.persist()
        return transaction

    def add_expense(
        self, description: str, amount: float, on_date: Optional[date] = None
    ) -> Expense:
        """Record an expense and save.

        Raises:
            ValidationError: If description is blank
            StorageUnavailableError: If the document cannot be saved
        """
        expense = Expense(
            id=self.store.new_id(),
            description=_require_text(description, "Description"),
            amount=amount,
            date=date_to_timestamp(on_date) if on_date is not None else utc_timestamp(),
        )
        expense = self.store.append("expenses", expense)
        self.store.persist()
        return expense


def _require_text(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(blank_field(field_name))
    return value.strip()
