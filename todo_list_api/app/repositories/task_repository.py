"""
Repository for task database operations.

Tasks live in the ``tasks`` table; their tags are stored in the
``task_tags`` association table.  A task row and its tag links are
always written in the same transaction, and every read returns tasks
with their ``tags`` already populated.
"""

import sqlite3
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models import Tag, Task
from .base import (
    MissingReferenceError,
    SQLiteRepository,
    is_foreign_key_violation,
    parse_timestamp,
    placeholders,
)

_COLUMNS = "id, title, description, is_completed, due_date, user_id, created_at, updated_at"


class TaskRepository(SQLiteRepository):
    """Repository for Task database operations"""

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        conn = self._connect()
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,)).fetchall()
            tasks = self._build_tasks(conn, rows)
            return tasks[0] if tasks else None
        finally:
            conn.close()

    async def get_all(self) -> List[Task]:
        conn = self._connect()
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM tasks ORDER BY id").fetchall()
            return self._build_tasks(conn, rows)
        finally:
            conn.close()

    async def get_by_tag_ids(self, tag_ids: Iterable[int]) -> List[Task]:
        """Return tasks linked to at least one of ``tag_ids``, ordered by id."""
        ids = sorted(set(tag_ids))
        if not ids:
            return []
        conn = self._connect()
        try:
            rows = conn.execute(
                f"""
                SELECT {_COLUMNS} FROM tasks
                WHERE id IN (
                    SELECT task_id FROM task_tags WHERE tag_id IN ({placeholders(ids)})
                )
                ORDER BY id
                """,
                tuple(ids),
            ).fetchall()
            return self._build_tasks(conn, rows)
        finally:
            conn.close()

    async def add(self, task: Task) -> Task:
        """Insert ``task`` with its tag links and return the stored task."""
        conn = self._connect()
        try:
            cursor = conn.execute(
                """
                INSERT INTO tasks (title, description, is_completed, due_date, user_id)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    task.title,
                    task.description,
                    1 if task.is_completed else 0,
                    task.due_date.isoformat() if task.due_date else None,
                    task.user_id,
                ),
            )
            task_id = cursor.lastrowid
            self._write_links(conn, task_id, task.tag_ids)
            conn.commit()
            rows = conn.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,)).fetchall()
            return self._build_tasks(conn, rows)[0]
        except sqlite3.Error as exc:
            conn.rollback()
            self._raise_for_missing_reference(exc)
            raise
        finally:
            conn.close()

    async def update(self, task: Task) -> None:
        """Overwrite the stored row and replace the tag links of ``task``."""
        conn = self._connect()
        try:
            conn.execute(
                """
                UPDATE tasks
                SET title = ?, description = ?, is_completed = ?, due_date = ?, user_id = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    task.title,
                    task.description,
                    1 if task.is_completed else 0,
                    task.due_date.isoformat() if task.due_date else None,
                    task.user_id,
                    task.id,
                ),
            )
            conn.execute("DELETE FROM task_tags WHERE task_id = ?", (task.id,))
            self._write_links(conn, task.id, task.tag_ids)
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            self._raise_for_missing_reference(exc)
            raise
        finally:
            conn.close()

    async def delete(self, task: Task) -> None:
        """Delete ``task``; its tag links go with it (``ON DELETE CASCADE``)."""
        conn = self._connect()
        try:
            conn.execute("DELETE FROM tasks WHERE id = ?", (task.id,))
            conn.commit()
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _raise_for_missing_reference(exc: sqlite3.Error) -> None:
        # The owner or a linked tag was deleted after the service checked it.
        if isinstance(exc, sqlite3.IntegrityError) and is_foreign_key_violation(exc):
            raise MissingReferenceError(str(exc)) from exc

    @staticmethod
    def _write_links(conn: sqlite3.Connection, task_id: int, tag_ids: Sequence[int]) -> None:
        conn.executemany(
            "INSERT OR IGNORE INTO task_tags (task_id, tag_id) VALUES (?, ?)",
            [(task_id, tag_id) for tag_id in tag_ids],
        )

    @staticmethod
    def _load_tags(conn: sqlite3.Connection, task_ids: Sequence[int]) -> Dict[int, Tuple[Tag, ...]]:
        if not task_ids:
            return {}
        rows = conn.execute(
            f"""
            SELECT tt.task_id, t.id, t.name
            FROM task_tags tt JOIN tags t ON t.id = tt.tag_id
            WHERE tt.task_id IN ({placeholders(task_ids)})
            ORDER BY t.id
            """,
            tuple(task_ids),
        ).fetchall()
        grouped: Dict[int, List[Tag]] = defaultdict(list)
        for row in rows:
            grouped[row["task_id"]].append(Tag(id=row["id"], name=row["name"]))
        return {task_id: tuple(tags) for task_id, tags in grouped.items()}

    @classmethod
    def _build_tasks(cls, conn: sqlite3.Connection, rows: List[sqlite3.Row]) -> List[Task]:
        tags_by_task = cls._load_tags(conn, [row["id"] for row in rows])
        return [
            Task(
                id=row["id"],
                title=row["title"],
                description=row["description"],
                is_completed=bool(row["is_completed"]),
                due_date=parse_timestamp(row["due_date"]),
                user_id=row["user_id"],
                tags=tags_by_task.get(row["id"], ()),
                created_at=parse_timestamp(row["created_at"]),
                updated_at=parse_timestamp(row["updated_at"]),
            )
            for row in rows
        ]
