"""Task entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .tag import Tag


@dataclass(frozen=True)
class Task:
    """A to-do item.

    ``tags`` holds the tags linked to the task through the
    ``task_tags`` association table; ``user_id`` is the optional owner.
    """

    title: str
    description: Optional[str] = None
    is_completed: bool = False
    due_date: Optional[datetime] = None
    user_id: Optional[int] = None
    tags: Tuple[Tag, ...] = ()
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def tag_ids(self) -> Tuple[int, ...]:
        return tuple(tag.id for tag in self.tags if tag.id is not None)
