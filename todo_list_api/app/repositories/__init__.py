"""
Persistence layer.

One repository per entity wraps the SQLite queries for that table and
converts rows into immutable entities from ``models``.  Services only
talk to repositories, never to ``sqlite3`` directly, so the storage can
be replaced without touching business rules.
"""

from .base import DuplicateKeyError, MissingReferenceError
from .tag_repository import TagRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "DuplicateKeyError",
    "MissingReferenceError",
    "TagRepository",
    "TaskRepository",
    "UserRepository",
]
