"""
Business logic for to-do tasks.

Tasks have no natural key, so any number of tasks may share a title.
What a task write does check is its references: every id in
``tag_ids`` must name an existing tag and ``user_id``, when given, an
existing user.  A payload that references something missing is
refused with ``MissingReferences`` before anything is written.  If a
referenced row is deleted between that check and the write, storage
refuses the write and the same outcome is reported.

``get_tasks_by_tags`` returns every task carrying at least one of the
requested tags.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..core.logging_config import get_app_logger
from ..models import Tag, Task
from ..repositories import MissingReferenceError, TagRepository, TaskRepository, UserRepository
from ..schemas.task import TaskCreate, TaskRead, TaskUpdate
from .mapping import TaskMapper
from .results import Created, Creation, Found, Lookup, MissingReferences, NotFound, Update, Updated


class TaskService:
    """Service class for managing tasks and their tag links."""

    def __init__(
        self,
        repository: TaskRepository,
        tag_repository: TagRepository,
        user_repository: UserRepository,
        mapper: Optional[TaskMapper] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.repository = repository
        self.tag_repository = tag_repository
        self.user_repository = user_repository
        self.mapper = mapper or TaskMapper()
        self.logger = logger or get_app_logger("services.tasks")

    async def get_task_by_id(self, task_id: int) -> Lookup[TaskRead]:
        task = await self.repository.get_by_id(task_id)
        if task is None:
            return NotFound(task_id)
        return Found(self.mapper.to_read(task))

    async def get_all_tasks(self) -> List[TaskRead]:
        tasks = await self.repository.get_all()
        return [self.mapper.to_read(task) for task in tasks]

    async def get_tasks_by_tags(self, tag_ids: Iterable[int]) -> List[TaskRead]:
        """Return tasks linked to any of ``tag_ids``.  No ids, no tasks."""
        tasks = await self.repository.get_by_tag_ids(tag_ids)
        return [self.mapper.to_read(task) for task in tasks]

    async def create_task(self, data: TaskCreate) -> Creation[TaskRead]:
        if data.user_id is not None and await self._user_missing(data.user_id):
            return MissingReferences("user_id", (data.user_id,))
        tags = await self._resolve_tags(data.tag_ids)
        if isinstance(tags, MissingReferences):
            return tags
        entity = self.mapper.to_entity(data, tags)
        try:
            task = await self.repository.add(entity)
        except MissingReferenceError:
            missing = await self._references_lost(entity)
            if missing is None:
                raise
            return missing
        self.logger.info("Created task %s with %d tag(s)", task.id, len(task.tags))
        return Created(self.mapper.to_read(task))

    async def update_task(self, task_id: int, data: TaskUpdate) -> Update:
        """Apply the fields present in ``data`` to an existing task.

        ``tag_ids``, when sent, replaces the task's whole tag set.
        """
        existing = await self.repository.get_by_id(task_id)
        if existing is None:
            return NotFound(task_id)
        if (
            "user_id" in data.model_fields_set
            and data.user_id is not None
            and await self._user_missing(data.user_id)
        ):
            return MissingReferences("user_id", (data.user_id,))
        tags = None
        if data.tag_ids is not None:
            tags = await self._resolve_tags(data.tag_ids)
            if isinstance(tags, MissingReferences):
                return tags
        updated = self.mapper.apply_update(data, existing, tags)
        try:
            await self.repository.update(updated)
        except MissingReferenceError:
            missing = await self._references_lost(updated)
            if missing is None:
                raise
            return missing
        self.logger.info("Updated task %s", task_id)
        return Updated(task_id)

    async def delete_task(self, task_id: int) -> bool:
        existing = await self.repository.get_by_id(task_id)
        if existing is None:
            return False
        await self.repository.delete(existing)
        self.logger.info("Deleted task %s", task_id)
        return True

    # ------------------------------------------------------------------
    # Reference checks
    # ------------------------------------------------------------------
    async def _user_missing(self, user_id: int) -> bool:
        if await self.user_repository.get_by_id(user_id) is None:
            self.logger.debug("Task refers to unknown user %s", user_id)
            return True
        return False

    async def _resolve_tags(self, tag_ids: Sequence[int]) -> Union[Tuple[Tag, ...], MissingReferences]:
        if not tag_ids:
            return ()
        tags = await self.tag_repository.get_by_ids(tag_ids)
        missing = sorted(set(tag_ids) - {tag.id for tag in tags})
        if missing:
            self.logger.debug("Task refers to unknown tag(s) %s", missing)
            return MissingReferences("tag_ids", tuple(missing))
        return tuple(tags)

    async def _references_lost(self, task: Task) -> Optional[MissingReferences]:
        """Find which reference of ``task`` vanished after the pre-write check."""
        self.logger.debug("Storage refused task references; checking again")
        if task.user_id is not None and await self._user_missing(task.user_id):
            return MissingReferences("user_id", (task.user_id,))
        tags = await self._resolve_tags(task.tag_ids)
        return tags if isinstance(tags, MissingReferences) else None
