# tests/test_mapping.py

from datetime import datetime

from todo_list_api.app.models import Tag, Task, User
from todo_list_api.app.schemas.tag import TagCreate, TagUpdate
from todo_list_api.app.schemas.task import TaskCreate, TaskUpdate
from todo_list_api.app.schemas.user import UserUpdate
from todo_list_api.app.services.mapping import TagMapper, TaskMapper, UserMapper


def test_tag_apply_update_returns_new_entity():
    existing = Tag(id=1, name="Old")

    updated = TagMapper().apply_update(TagUpdate(name="New"), existing)

    assert updated == Tag(id=1, name="New")
    assert existing == Tag(id=1, name="Old")


def test_tag_to_entity_has_no_id():
    assert TagMapper().to_entity(TagCreate(name="Urgent")) == Tag(name="Urgent")


def test_user_apply_update_only_touches_sent_fields():
    created = datetime(2024, 5, 1, 12, 0)
    existing = User(id=3, email="a@example.com", full_name="Ann", created_at=created)

    updated = UserMapper().apply_update(UserUpdate(full_name=None), existing)

    assert updated.full_name is None
    assert updated.email == "a@example.com"
    assert updated.created_at == created
    assert existing.full_name == "Ann"


def test_task_to_entity_carries_resolved_tags():
    tags = [Tag(id=1, name="home")]

    task = TaskMapper().to_entity(TaskCreate(title="Fix sink", tag_ids=[1]), tags)

    assert task.tags == (Tag(id=1, name="home"),)
    assert task.tag_ids == (1,)
    assert task.id is None


def test_task_apply_update_without_tags_keeps_existing_tags():
    existing = Task(id=1, title="Draft", tags=(Tag(id=2, name="work"),))

    updated = TaskMapper().apply_update(TaskUpdate(title="Final"), existing)

    assert updated.title == "Final"
    assert updated.tags == existing.tags


def test_task_apply_update_with_empty_tag_list_clears_tags():
    existing = Task(id=1, title="Draft", tags=(Tag(id=2, name="work"),))

    updated = TaskMapper().apply_update(TaskUpdate(tag_ids=[]), existing, tags=())

    assert updated.tags == ()
    assert existing.tags == (Tag(id=2, name="work"),)


def test_task_to_read_nests_tags():
    task = Task(id=5, title="Read", is_completed=True, tags=(Tag(id=1, name="a"), Tag(id=2, name="b")))

    read = TaskMapper().to_read(task)

    assert read.id == 5
    assert read.is_completed is True
    assert [(t.id, t.name) for t in read.tags] == [(1, "a"), (2, "b")]
