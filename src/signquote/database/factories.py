"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from signquote.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "SIGNQUOTE_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".signquote"


def default_database_path() -> str:
    """Return ~/.signquote/signquote.db, creating the directory if needed."""
    DEFAULT_DB_DIR.mkdir(exist_ok=True)
    return str(DEFAULT_DB_DIR / "signquote.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite-backed database.

    The path is taken from ``database_path``, then SIGNQUOTE_DB_PATH, then
    the default location.
    """
    path = database_path or os.environ.get(DB_PATH_ENV) or default_database_path()
    return SQLAlchemyDatabase(f"sqlite:///{path}")
