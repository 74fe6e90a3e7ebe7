"""CSV pledge import domain service."""

from pathlib import Path
from typing import Any

from pledgebook.config import DEFAULT_DEPARTMENT
from pledgebook.domain.entities import Pledge
from pledgebook.domain.errors import MalformedCsvLineError
from pledgebook.domain.store import DocumentStore
from pledgebook.logging_utils import get_logger
from pledgebook.utils.amount_parser import parse_leading_amount

LOGGER = get_logger(__name__)


class CSVImportService:
    """Service for importing pledges from CSV text.

    Import is best-effort: lines missing a name or amount are skipped and the
    rest are kept.
    """

    def __init__(self, store: DocumentStore, default_department: str = DEFAULT_DEPARTMENT):
        """Initialize CSV import service.

        Args:
            store: Document store receiving the pledges
            default_department: Department for lines with a blank department
        """
        self.store = store
        self.default_department = default_department

    def import_pledges(self, text: str) -> dict[str, Any]:
        """Import pledges from CSV text.

        Blank lines are ignored and the first remaining line is taken as the
        header. Each following line is read as ``name,department,amount``;
        extra columns are ignored.

        Args:
            text: CSV text

        Returns:
            Dict with import statistics:
            - imported: number of pledges added
            - skipped: number of lines skipped
            - errors: list of messages for skipped lines
        """
        lines = [line for line in text.lstrip("\ufeff").splitlines() if line.strip()]

        imported = 0
        errors = []

        # Line numbers count non-blank lines; the header is line 1
        for line_num, line in enumerate(lines[1:], start=2):
            try:
                pledge = self._parse_line(line_num, line)
            except MalformedCsvLineError as e:
                LOGGER.debug("Skipping CSV line: %s", e)
                errors.append(str(e))
                continue
            self.store.append("pledges", pledge)
            imported += 1

        self.store.persist()
        LOGGER.info("Imported %d pledges from CSV, skipped %d lines", imported, len(errors))

        return {
            "imported": imported,
            "skipped": len(errors),
            "errors": errors,
        }

    def import_file(self, csv_file_path: str) -> dict[str, Any]:
        """Import pledges from a CSV file. See ``import_pledges``.

        Raises:
            FileNotFoundError: If CSV file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")
        return self.import_pledges(csv_path.read_text(encoding="utf-8-sig"))

    def _parse_line(self, line_num: int, line: str) -> Pledge:
        # Plain comma split; quotes are not treated specially
        fields = [value.strip() for value in line.split(",")[:3]]
        fields += [""] * (3 - len(fields))
        name, department, amount_str = fields

        if not name:
            raise MalformedCsvLineError(line_num, "Missing name")
        if not amount_str:
            raise MalformedCsvLineError(line_num, "Missing amount")

        return Pledge(
            id=self.store.new_id(),
            name=name,
            department=department or self.default_department,
            amount=parse_leading_amount(amount_str),
        )
