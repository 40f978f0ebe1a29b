"""
Repository for tag database operations.

All queries use parameterised statements.  ``name`` carries a
``UNIQUE`` constraint in the schema; a write that violates it is
reported as ``DuplicateKeyError`` rather than a raw
``sqlite3.IntegrityError``.
"""

import sqlite3
from typing import Iterable, List, Optional

from ..models import Tag
from .base import DuplicateKeyError, SQLiteRepository, is_unique_violation, placeholders


class TagRepository(SQLiteRepository):
    """Repository for Tag database operations"""

    async def get_by_id(self, tag_id: int) -> Optional[Tag]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT id, name FROM tags WHERE id = ?", (tag_id,)).fetchone()
            return self._row_to_tag(row) if row else None
        finally:
            conn.close()

    async def get_all(self) -> List[Tag]:
        conn = self._connect()
        try:
            rows = conn.execute("SELECT id, name FROM tags ORDER BY id").fetchall()
            return [self._row_to_tag(row) for row in rows]
        finally:
            conn.close()

    async def get_by_name(self, name: str) -> Optional[Tag]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT id, name FROM tags WHERE name = ?", (name,)).fetchone()
            return self._row_to_tag(row) if row else None
        finally:
            conn.close()

    async def get_by_ids(self, tag_ids: Iterable[int]) -> List[Tag]:
        """Get the tags whose ids appear in ``tag_ids``; unknown ids are skipped."""
        ids = sorted(set(tag_ids))
        if not ids:
            return []
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT id, name FROM tags WHERE id IN ({placeholders(ids)}) ORDER BY id",
                tuple(ids),
            ).fetchall()
            return [self._row_to_tag(row) for row in rows]
        finally:
            conn.close()

    async def add(self, tag: Tag) -> Tag:
        """Insert ``tag`` and return it with the generated id."""
        conn = self._connect()
        try:
            cursor = conn.execute("INSERT INTO tags (name) VALUES (?)", (tag.name,))
            conn.commit()
            return Tag(id=cursor.lastrowid, name=tag.name)
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if is_unique_violation(exc):
                raise DuplicateKeyError("name", tag.name) from exc
            raise
        finally:
            conn.close()

    async def update(self, tag: Tag) -> None:
        conn = self._connect()
        try:
            conn.execute("UPDATE tags SET name = ? WHERE id = ?", (tag.name, tag.id))
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if is_unique_violation(exc):
                raise DuplicateKeyError("name", tag.name) from exc
            raise
        finally:
            conn.close()

    async def delete(self, tag: Tag) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM tags WHERE id = ?", (tag.id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_tag(row: sqlite3.Row) -> Tag:
        return Tag(id=row["id"], name=row["name"])
