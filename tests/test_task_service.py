# tests/test_task_service.py

from __future__ import annotations

import pytest

from todo_list_api.app.models import Tag, Task, User
from todo_list_api.app.repositories import MissingReferenceError
from todo_list_api.app.schemas.task import TaskCreate, TaskUpdate
from todo_list_api.app.services import TaskService
from todo_list_api.app.services.results import (
    Created,
    Found,
    MissingReferences,
    NotFound,
    Updated,
)


@pytest.fixture()
def service(task_repository, tag_repository, user_repository, mock_logger) -> TaskService:
    return TaskService(task_repository, tag_repository, user_repository, logger=mock_logger)


@pytest.mark.asyncio
async def test_get_task_by_id_not_found(service, task_repository) -> None:
    task_repository.get_by_id.return_value = None

    assert await service.get_task_by_id(9) == NotFound(9)


@pytest.mark.asyncio
async def test_get_task_by_id_includes_tags(service, task_repository) -> None:
    task_repository.get_by_id.return_value = Task(id=1, title="Write report", tags=(Tag(id=2, name="work"),))

    result = await service.get_task_by_id(1)

    assert isinstance(result, Found)
    assert [t.name for t in result.value.tags] == ["work"]


@pytest.mark.asyncio
async def test_create_task_with_existing_tags(service, task_repository, tag_repository) -> None:
    tags = [Tag(id=1, name="home"), Tag(id=2, name="urgent")]
    tag_repository.get_by_ids.return_value = tags
    task_repository.add.return_value = Task(id=10, title="Fix sink", tags=tuple(tags))

    result = await service.create_task(TaskCreate(title="Fix sink", tag_ids=[1, 2]))

    assert isinstance(result, Created)
    assert result.value.id == 10
    assert [t.id for t in result.value.tags] == [1, 2]
    task_repository.add.assert_awaited_once_with(Task(title="Fix sink", tags=tuple(tags)))


@pytest.mark.asyncio
async def test_create_task_refuses_unknown_tags(service, task_repository, tag_repository) -> None:
    tag_repository.get_by_ids.return_value = [Tag(id=1, name="home")]

    result = await service.create_task(TaskCreate(title="Fix sink", tag_ids=[1, 5, 6]))

    assert result == MissingReferences("tag_ids", (5, 6))
    task_repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_task_refuses_unknown_owner(service, task_repository, user_repository) -> None:
    user_repository.get_by_id.return_value = None

    result = await service.create_task(TaskCreate(title="Fix sink", user_id=4))

    assert result == MissingReferences("user_id", (4,))
    task_repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_task_without_tags_skips_tag_lookup(service, task_repository, tag_repository, user_repository) -> None:
    user_repository.get_by_id.return_value = User(id=4, email="a@b.io")
    task_repository.add.return_value = Task(id=1, title="Call mom", user_id=4)

    result = await service.create_task(TaskCreate(title="Call mom", user_id=4))

    assert isinstance(result, Created)
    assert result.value.user_id == 4
    tag_repository.get_by_ids.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_task_keeps_tags_when_tag_ids_not_sent(service, task_repository, tag_repository) -> None:
    existing = Task(id=1, title="Draft", tags=(Tag(id=3, name="work"),))
    task_repository.get_by_id.return_value = existing

    result = await service.update_task(1, TaskUpdate(is_completed=True))

    assert result == Updated(1)
    tag_repository.get_by_ids.assert_not_awaited()
    task_repository.update.assert_awaited_once_with(
        Task(id=1, title="Draft", is_completed=True, tags=(Tag(id=3, name="work"),))
    )
    assert existing.is_completed is False


@pytest.mark.asyncio
async def test_update_task_replaces_tag_set(service, task_repository, tag_repository) -> None:
    task_repository.get_by_id.return_value = Task(id=1, title="Draft", tags=(Tag(id=3, name="work"),))
    tag_repository.get_by_ids.return_value = [Tag(id=4, name="home")]

    result = await service.update_task(1, TaskUpdate(tag_ids=[4]))

    assert result == Updated(1)
    stored = task_repository.update.await_args.args[0]
    assert stored.tags == (Tag(id=4, name="home"),)


@pytest.mark.asyncio
async def test_update_task_refuses_unknown_tags(service, task_repository, tag_repository) -> None:
    task_repository.get_by_id.return_value = Task(id=1, title="Draft")
    tag_repository.get_by_ids.return_value = []

    result = await service.update_task(1, TaskUpdate(tag_ids=[8]))

    assert result == MissingReferences("tag_ids", (8,))
    task_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_task_can_clear_owner(service, task_repository, user_repository) -> None:
    task_repository.get_by_id.return_value = Task(id=1, title="Draft", user_id=2)

    result = await service.update_task(1, TaskUpdate(user_id=None))

    assert result == Updated(1)
    user_repository.get_by_id.assert_not_awaited()
    assert task_repository.update.await_args.args[0].user_id is None


@pytest.mark.asyncio
async def test_update_missing_task(service, task_repository) -> None:
    task_repository.get_by_id.return_value = None

    assert await service.update_task(1, TaskUpdate(title="x")) == NotFound(1)
    task_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_task(service, task_repository) -> None:
    existing = Task(id=1, title="Draft")
    task_repository.get_by_id.return_value = existing

    assert await service.delete_task(1) is True
    task_repository.delete.assert_awaited_once_with(existing)


@pytest.mark.asyncio
async def test_delete_missing_task(service, task_repository) -> None:
    task_repository.get_by_id.return_value = None

    assert await service.delete_task(1) is False
    task_repository.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_tasks_by_tags_delegates_to_repository(service, task_repository) -> None:
    task_repository.get_by_tag_ids.return_value = [Task(id=2, title="b")]

    result = await service.get_tasks_by_tags([1, 2])

    assert [t.id for t in result] == [2]
    task_repository.get_by_tag_ids.assert_awaited_once_with([1, 2])


@pytest.mark.asyncio
async def test_update_task_refuses_unknown_owner(service, task_repository, user_repository) -> None:
    task_repository.get_by_id.return_value = Task(id=1, title="Draft")
    user_repository.get_by_id.return_value = None

    result = await service.update_task(1, TaskUpdate(user_id=7))

    assert result == MissingReferences("user_id", (7,))
    task_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_task_reports_tag_deleted_before_write(service, task_repository, tag_repository) -> None:
    # The tag exists when checked but is gone by the time the task is stored.
    tag_repository.get_by_ids.side_effect = [[Tag(id=1, name="home")], []]
    task_repository.add.side_effect = MissingReferenceError("FOREIGN KEY constraint failed")

    result = await service.create_task(TaskCreate(title="Fix sink", tag_ids=[1]))

    assert result == MissingReferences("tag_ids", (1,))


@pytest.mark.asyncio
async def test_update_task_reports_owner_deleted_before_write(service, task_repository, user_repository) -> None:
    task_repository.get_by_id.return_value = Task(id=1, title="Draft")
    user_repository.get_by_id.side_effect = [User(id=4, email="a@b.io"), None]
    task_repository.update.side_effect = MissingReferenceError("FOREIGN KEY constraint failed")

    result = await service.update_task(1, TaskUpdate(user_id=4))

    assert result == MissingReferences("user_id", (4,))


@pytest.mark.asyncio
async def test_unexplained_reference_failure_propagates(service, task_repository) -> None:
    task_repository.add.side_effect = MissingReferenceError("FOREIGN KEY constraint failed")

    with pytest.raises(MissingReferenceError):
        await service.create_task(TaskCreate(title="Fix sink"))
