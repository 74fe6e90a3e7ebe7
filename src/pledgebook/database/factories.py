"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from pledgebook.config import DB_PATH_ENV_VAR, DEFAULT_DATA_DIR, DEFAULT_DB_FILENAME
from pledgebook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks PLEDGEBOOK_DB_PATH
            environment variable, then defaults to ~/.pledgebook/pledgebook.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        db_dir = Path.home() / DEFAULT_DATA_DIR
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / DEFAULT_DB_FILENAME)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
