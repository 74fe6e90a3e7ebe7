"""Database layer for pledgebook application."""

from pledgebook.database.base import Database
from pledgebook.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
