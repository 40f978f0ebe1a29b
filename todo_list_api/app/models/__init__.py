"""
Domain entities.

Entities are the persisted shape of tags, tasks and users as the
repositories store them.  They are immutable: an update produces a
new value rather than changing the one that was read, and storage
fills in ``id`` (and timestamps) when an entity is first added.
"""

from .tag import Tag
from .task import Task
from .user import User

__all__ = ["Tag", "Task", "User"]
