"""
Task endpoints.

CRUD routes for to-do tasks and a lookup of tasks by tag.  Tasks refer
to tags (``tag_ids``) and optionally to an owner (``user_id``);
payloads that refer to tags or users that do not exist are refused
with HTTP 400.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from ...schemas.task import TaskCreate, TaskRead, TaskUpdate
from ...services import TaskService
from ...services.results import Created, NotFound, Updated
from ..deps import get_logger, get_task_service
from ..errors import not_found, rejected

router = APIRouter()


@router.get("", response_model=List[TaskRead])
async def get_all_tasks(service: TaskService = Depends(get_task_service)) -> List[TaskRead]:
    """Return every task with its tags."""
    return await service.get_all_tasks()


@router.get("/by-tags", response_model=List[TaskRead])
async def get_tasks_by_tags(
    tag_ids: List[int] = Query(
        default=[],
        alias="tagIds",
        description="Repeat the parameter for several tags, e.g. ``?tagIds=1&tagIds=2``.",
    ),
    service: TaskService = Depends(get_task_service),
) -> List[TaskRead]:
    """Return tasks carrying at least one of the given tags.

    Without any ``tagIds`` the result is an empty list.
    """
    return await service.get_tasks_by_tags(tag_ids)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task_by_id(task_id: int, service: TaskService = Depends(get_task_service)) -> TaskRead:
    result = await service.get_task_by_id(task_id)
    if isinstance(result, NotFound):
        raise not_found("Task", result)
    return result.value


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def add_task(
    task_in: TaskCreate,
    request: Request,
    response: Response,
    service: TaskService = Depends(get_task_service),
    logger: logging.Logger = Depends(get_logger),
) -> TaskRead:
    """Create a task."""
    result = await service.create_task(task_in)
    if not isinstance(result, Created):
        logger.warning("Task %r could not be created", task_in.title)
        raise rejected("Task", result, "created")
    response.headers["Location"] = str(request.url_for("get_task_by_id", task_id=result.value.id))
    return result.value


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_task(
    task_id: int,
    task_in: TaskUpdate,
    service: TaskService = Depends(get_task_service),
    logger: logging.Logger = Depends(get_logger),
) -> None:
    """Update the fields present in the payload; ``tag_ids`` replaces the tag set."""
    result = await service.update_task(task_id, task_in)
    if isinstance(result, NotFound):
        raise not_found("Task", result)
    if not isinstance(result, Updated):
        logger.warning("Task %s could not be updated", task_id)
        raise rejected("Task", result, "updated")
    return None


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> None:
    if not await service.delete_task(task_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task with ID {task_id} not found.",
        )
    return None
