"""Database layer for signquote application."""

from signquote.database.base import Database
from signquote.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
