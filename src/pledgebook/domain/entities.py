"""Domain model entities for pledgebook.

These are plain data classes for the fundraising records and the read models
derived from them. They carry no storage concerns; conversion to and from the
serialized document lives in ``pledgebook.database.mappers``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Pledge:
    """A recorded commitment to donate a specific amount."""

    id: str
    name: str
    department: str
    amount: float


@dataclass(frozen=True)
class Transaction:
    """Cash received, optionally linked to a pledge.

    ``date`` is the stored ISO-8601 text; it is parsed only when ordering
    the ledger.
    """

    id: str
    name: str
    department: str
    amount: float
    date: str
    pledge_id: Optional[str] = None


@dataclass(frozen=True)
class Expense:
    """Money spent."""

    id: str
    description: str
    amount: float
    date: str


@dataclass
class Document:
    """The full persisted state: pledges, transactions and expenses."""

    pledges: list[Pledge] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Document":
        """Return a new document with no records."""
        return cls()

    def is_empty(self) -> bool:
        """Return True when the document holds no records at all."""
        return not (self.pledges or self.transactions or self.expenses)


class PledgeStatus(str, Enum):
    """Fulfillment status of a pledge."""

    FULFILLED = "fulfilled"
    PENDING = "pending"


class EntryKind(str, Enum):
    """Kind of a unified ledger entry."""

    INCOME = "Income"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class PledgeSummary:
    """Pledge fulfillment row."""

    pledge: Pledge
    paid: float
    balance: float
    status: PledgeStatus


@dataclass(frozen=True)
class DepartmentTotal:
    """Cash collected for one configured department."""

    department: str
    total: float


@dataclass(frozen=True)
class DashboardTotals:
    """Headline figures for the dashboard."""

    revenue: float
    expenses: float
    net: float


@dataclass(frozen=True)
class LedgerEntry:
    """One row of the unified ledger."""

    id: str
    date: str
    name: str
    kind: EntryKind
    amount: float

    @property
    def short_id(self) -> str:
        """Last five characters of the id, for compact display."""
        return self.id[-5:]
