"""
Conversions between API schemas and domain entities.

Every mapper is pure: ``apply_update`` never touches the entity it is
given and returns a new one built with ``dataclasses.replace``.  Update
schemas are partial, so only the fields a client actually sent
(``model_dump(exclude_unset=True)``) are applied.
"""

from dataclasses import replace
from typing import Optional, Sequence

from ..models import Tag, Task, User
from ..schemas.tag import TagCreate, TagRead, TagUpdate
from ..schemas.task import TaskCreate, TaskRead, TaskUpdate
from ..schemas.user import UserCreate, UserRead, UserUpdate


class TagMapper:
    def to_entity(self, data: TagCreate) -> Tag:
        return Tag(name=data.name)

    def apply_update(self, data: TagUpdate, existing: Tag) -> Tag:
        return replace(existing, name=data.name)

    def to_read(self, tag: Tag) -> TagRead:
        return TagRead(id=tag.id, name=tag.name)


class UserMapper:
    def to_entity(self, data: UserCreate) -> User:
        return User(email=data.email, full_name=data.full_name)

    def apply_update(self, data: UserUpdate, existing: User) -> User:
        return replace(existing, **data.model_dump(exclude_unset=True))

    def to_read(self, user: User) -> UserRead:
        return UserRead(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            created_at=user.created_at,
        )


class TaskMapper:
    """Maps tasks; tag ids in the payload are resolved to ``tags`` by the caller."""

    def __init__(self, tag_mapper: Optional[TagMapper] = None) -> None:
        self.tag_mapper = tag_mapper or TagMapper()

    def to_entity(self, data: TaskCreate, tags: Sequence[Tag] = ()) -> Task:
        return Task(
            title=data.title,
            description=data.description,
            is_completed=data.is_completed,
            due_date=data.due_date,
            user_id=data.user_id,
            tags=tuple(tags),
        )

    def apply_update(self, data: TaskUpdate, existing: Task, tags: Optional[Sequence[Tag]] = None) -> Task:
        changes = data.model_dump(exclude_unset=True, exclude={"tag_ids"})
        if tags is not None:
            changes["tags"] = tuple(tags)
        return replace(existing, **changes)

    def to_read(self, task: Task) -> TaskRead:
        return TaskRead(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            due_date=task.due_date,
            user_id=task.user_id,
            tags=[self.tag_mapper.to_read(tag) for tag in task.tags],
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
