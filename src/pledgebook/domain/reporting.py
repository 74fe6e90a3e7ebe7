"""Reporting and aggregation domain service."""

from datetime import date, datetime, UTC
from typing import Optional, Sequence

from pledgebook.config import DEPARTMENTS
from pledgebook.domain.entities import (
    DashboardTotals,
    DepartmentTotal,
    EntryKind,
    LedgerEntry,
    Pledge,
    PledgeStatus,
    PledgeSummary,
)
from pledgebook.domain.store import DocumentStore
from pledgebook.utils.date_parser import parse_timestamp

# Sort key for ledger entries whose date cannot be parsed: earlier than any real date.
EARLIEST = datetime.min.replace(tzinfo=UTC)


class ReportingService:
    """Service deriving displayed figures from the store's document.

    Every method recomputes from the live document; nothing is cached and
    nothing is written back.
    """

    def __init__(self, store: DocumentStore, departments: Sequence[str] = DEPARTMENTS):
        """Initialize reporting service.

        Args:
            store: Document store to read from
            departments: Ordered department names for per-department totals
        """
        self.store = store
        self.departments = tuple(departments)

    def total_revenue(self) -> float:
        """Sum of all transaction amounts."""
        return sum((t.amount for t in self.store.document.transactions), 0.0)

    def total_expenses(self) -> float:
        """Sum of all expense amounts."""
        return sum((e.amount for e in self.store.document.expenses), 0.0)

    def net_balance(self) -> float:
        """Revenue minus expenses."""
        return self.total_revenue() - self.total_expenses()

    def dashboard_totals(self) -> DashboardTotals:
        """Return revenue, expenses and net in one read model."""
        revenue = self.total_revenue()
        expenses = self.total_expenses()
        return DashboardTotals(revenue=revenue, expenses=expenses, net=revenue - expenses)

    def amount_paid_for_pledge(self, pledge_id: str) -> float:
        """Sum of transaction amounts linked to a pledge."""
        return sum(
            (t.amount for t in self.store.document.transactions if t.pledge_id == pledge_id),
            0.0,
        )

    def pledge_balance(self, pledge: Pledge) -> float:
        """Amount still owed on a pledge; negative when overpaid."""
        return pledge.amount - self.amount_paid_for_pledge(pledge.id)

    def pledge_status(self, pledge: Pledge) -> PledgeStatus:
        """Fulfilled once linked payments meet or exceed the pledged amount."""
        return _status(self.amount_paid_for_pledge(pledge.id), pledge.amount)

    def pledge_summaries(self) -> list[PledgeSummary]:
        """Return one fulfillment row per pledge, in insertion order."""
        summaries = []
        for pledge in self.store.document.pledges:
            paid = self.amount_paid_for_pledge(pledge.id)
            summaries.append(
                PledgeSummary(
                    pledge=pledge,
                    paid=paid,
                    balance=pledge.amount - paid,
                    status=_status(paid, pledge.amount),
                )
            )
        return summaries

    def department_total(self, department: str) -> float:
        """Sum of transaction amounts recorded against a department."""
        return sum(
            (t.amount for t in self.store.document.transactions if t.department == department),
            0.0,
        )

    def department_totals(self) -> list[DepartmentTotal]:
        """Return a total for every configured department, zeros included."""
        return [
            DepartmentTotal(department=name, total=self.department_total(name))
            for name in self.departments
        ]

    def unified_ledger(self) -> list[LedgerEntry]:
        """Merge transactions and expenses, newest first.

        Transactions come before expenses in the merged list, and the sort is
        stable, so entries with equal timestamps keep that order. Entries with
        a missing or unparsable date sort last.
        """
        document = self.store.document
        entries = [
            LedgerEntry(
                id=t.id,
                date=t.date,
                name=t.name,
                kind=EntryKind.INCOME,
                amount=t.amount,
            )
            for t in document.transactions
        ]
        entries.extend(
            LedgerEntry(
                id=e.id,
                date=e.date,
                name=e.description,
                kind=EntryKind.EXPENSE,
                amount=e.amount,
            )
            for e in document.expenses
        )
        return sorted(entries, key=_ledger_sort_key, reverse=True)

    def ledger_between(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[LedgerEntry]:
        """Unified ledger restricted to an inclusive date range.

        Entries without a parsable date are only included when no bound is
        given.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
        """
        entries = self.unified_ledger()
        if start_date is None and end_date is None:
            return entries

        filtered = []
        for entry in entries:
            timestamp = parse_timestamp(entry.date)
            if timestamp is None:
                continue
            day = timestamp.date()
            if start_date is not None and day < start_date:
                continue
            if end_date is not None and day > end_date:
                continue
            filtered.append(entry)
        return filtered


def _status(paid: float, amount: float) -> PledgeStatus:
    if paid >= amount:
        return PledgeStatus.FULFILLED
    return PledgeStatus.PENDING


def _ledger_sort_key(entry: LedgerEntry) -> datetime:
    timestamp = parse_timestamp(entry.date)
    if timestamp is None:
        return EARLIEST
    return timestamp
