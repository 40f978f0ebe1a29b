"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
``init_db``, which applies migrations when the application starts.
Every function accepts an explicit database path so that tests and
alternative deployments can point the API at a different file; when
omitted, ``settings.database_url`` is used.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS tags (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            email TEXT NOT NULL UNIQUE,
            full_name TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS tasks (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            description TEXT,
            is_completed INTEGER NOT NULL DEFAULT 0,
            due_date TIMESTAMP,
            user_id INTEGER,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE SET NULL
        );

        CREATE TABLE IF NOT EXISTS task_tags (
            task_id INTEGER NOT NULL,
            tag_id INTEGER NOT NULL,
            PRIMARY KEY (task_id, tag_id),
            FOREIGN KEY(task_id) REFERENCES tasks(id) ON DELETE CASCADE,
            FOREIGN KEY(tag_id) REFERENCES tags(id) ON DELETE CASCADE
        );
        """,
    ),
    # Migration 2: indices for the tag lookup and owner lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_task_tags_tag_id ON task_tags(tag_id);
        CREATE INDEX IF NOT EXISTS idx_tasks_user_id ON tasks(user_id);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved
    against the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name and
    has foreign key enforcement switched on, which SQLite leaves off
    by default.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor.

    Commits when the block completes, rolls back if it raises and
    always closes the connection on exit.
    """
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_url: Optional[str] = None) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries from
    ``MIGRATIONS``.  Returns the schema version after the run.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
    return current_version
