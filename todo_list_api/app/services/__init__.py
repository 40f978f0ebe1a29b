"""
Service layer.

Each service encapsulates the business rules for one entity: it checks
existence and uniqueness, calls its repository and mapper, and reports
the outcome with the value types from ``results``.  Services hold no
state between calls; repositories, mapper and logger are passed in at
construction.
"""

from .tag_service import TagService
from .task_service import TaskService
from .user_service import UserService

__all__ = ["TagService", "TaskService", "UserService"]
