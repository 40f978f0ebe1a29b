"""Shared helpers for the SQLite repositories."""

import sqlite3
from datetime import datetime
from typing import Any, Iterable, Optional

from ..core.db import get_connection


class DuplicateKeyError(Exception):
    """A write violated a ``UNIQUE`` constraint on a natural key."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"{field} {value!r} already exists")
        self.field = field
        self.value = value


class MissingReferenceError(Exception):
    """A write referred to a row that no longer exists (``FOREIGN KEY`` failure)."""


class SQLiteRepository:
    """Base class holding the database location.

    Each operation opens its own short-lived connection via
    ``_connect`` and closes it before returning.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.database_url)


def is_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    return "UNIQUE constraint failed" in str(exc)


def is_foreign_key_violation(exc: sqlite3.IntegrityError) -> bool:
    return "FOREIGN KEY constraint failed" in str(exc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Convert a stored timestamp into a ``datetime``.

    SQLite's ``CURRENT_TIMESTAMP`` produces ``YYYY-MM-DD HH:MM:SS``;
    values written by the application are ISO 8601.  Both parse with
    ``fromisoformat``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def placeholders(values: Iterable[Any]) -> str:
    return ", ".join("?" for _ in values)
