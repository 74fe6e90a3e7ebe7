"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StorageUnavailableError(DomainError):
    """The persistence slot could not be read or written."""


class MalformedBackupError(DomainError):
    """A backup snapshot failed to parse or failed the shape check."""


class MalformedCsvLineError(DomainError):
    """A single CSV import line is missing a required field."""

    def __init__(self, line_num: int, message: str):
        super().__init__(f"Line {line_num}: {message}")
        self.line_num = line_num


def pledge_not_found(pledge_id: str) -> str:
    """Return message for missing pledge."""
    return f"Pledge '{pledge_id}' not found"


def unknown_collection(collection: str) -> str:
    """Return message for an unknown document collection name."""
    return (
        f"Unknown collection '{collection}'. "
        "Expected one of: pledges, transactions, expenses"
    )


def wrong_record_type(collection: str, record: object) -> str:
    """Return message when a record does not belong in a collection."""
    return f"Cannot append {type(record).__name__} to '{collection}'"


def blank_field(field_name: str) -> str:
    """Return message for a required text field left blank."""
    return f"{field_name} must not be blank"
