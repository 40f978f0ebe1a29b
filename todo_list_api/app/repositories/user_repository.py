"""
Repository for user database operations.

Users are looked up by id or by e-mail; ``email`` is ``UNIQUE`` in the
schema.
"""

import sqlite3
from typing import List, Optional

from ..models import User
from .base import DuplicateKeyError, SQLiteRepository, is_unique_violation, parse_timestamp

_COLUMNS = "id, email, full_name, created_at"


class UserRepository(SQLiteRepository):
    """Repository for User database operations"""

    async def get_by_id(self, user_id: int) -> Optional[User]:
        conn = self._connect()
        try:
            row = conn.execute(f"SELECT {_COLUMNS} FROM users WHERE id = ?", (user_id,)).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    async def get_all(self) -> List[User]:
        conn = self._connect()
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM users ORDER BY id").fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    async def get_by_email(self, email: str) -> Optional[User]:
        conn = self._connect()
        try:
            row = conn.execute(f"SELECT {_COLUMNS} FROM users WHERE email = ?", (email,)).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    async def add(self, user: User) -> User:
        """Insert ``user`` and return the stored row (id and ``created_at`` filled in)."""
        conn = self._connect()
        try:
            cursor = conn.execute(
                "INSERT INTO users (email, full_name) VALUES (?, ?)",
                (user.email, user.full_name),
            )
            conn.commit()
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM users WHERE id = ?", (cursor.lastrowid,)
            ).fetchone()
            return self._row_to_user(row)
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if is_unique_violation(exc):
                raise DuplicateKeyError("email", user.email) from exc
            raise
        finally:
            conn.close()

    async def update(self, user: User) -> None:
        conn = self._connect()
        try:
            conn.execute(
                "UPDATE users SET email = ?, full_name = ? WHERE id = ?",
                (user.email, user.full_name, user.id),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if is_unique_violation(exc):
                raise DuplicateKeyError("email", user.email) from exc
            raise
        finally:
            conn.close()

    async def delete(self, user: User) -> None:
        """Delete ``user``; tasks owned by the user keep existing with no owner."""
        conn = self._connect()
        try:
            conn.execute("DELETE FROM users WHERE id = ?", (user.id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            email=row["email"],
            full_name=row["full_name"],
            created_at=parse_timestamp(row["created_at"]),
        )
