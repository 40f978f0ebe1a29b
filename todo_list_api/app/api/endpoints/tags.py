"""
Tag endpoints.

CRUD routes for tags.  Tag names are unique: creating a tag with a
name that already exists, or renaming a tag onto another tag's name,
is answered with HTTP 400.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ...schemas.tag import TagCreate, TagRead, TagUpdate
from ...services import TagService
from ...services.results import Created, NotFound, Updated
from ..deps import get_logger, get_tag_service
from ..errors import not_found, rejected

router = APIRouter()


@router.get("", response_model=List[TagRead])
async def get_all_tags(service: TagService = Depends(get_tag_service)) -> List[TagRead]:
    """Return every tag."""
    return await service.get_all_tags()


@router.get("/{tag_id}", response_model=TagRead)
async def get_tag_by_id(tag_id: int, service: TagService = Depends(get_tag_service)) -> TagRead:
    """Retrieve a single tag by ID, or 404."""
    result = await service.get_tag_by_id(tag_id)
    if isinstance(result, NotFound):
        raise not_found("Tag", result)
    return result.value


@router.post("", response_model=TagRead, status_code=status.HTTP_201_CREATED)
async def add_tag(
    tag_in: TagCreate,
    request: Request,
    response: Response,
    service: TagService = Depends(get_tag_service),
    logger: logging.Logger = Depends(get_logger),
) -> TagRead:
    """Create a tag.  Returns 400 if the name is already taken."""
    result = await service.create_tag(tag_in)
    if not isinstance(result, Created):
        logger.warning("Tag %r could not be created", tag_in.name)
        raise rejected("Tag", result, "created")
    response.headers["Location"] = str(request.url_for("get_tag_by_id", tag_id=result.value.id))
    return result.value


@router.put("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_tag(
    tag_id: int,
    tag_in: TagUpdate,
    service: TagService = Depends(get_tag_service),
    logger: logging.Logger = Depends(get_logger),
) -> None:
    """Rename a tag: 204 on success, 404 if missing, 400 if the name is taken."""
    result = await service.update_tag(tag_id, tag_in)
    if isinstance(result, NotFound):
        raise not_found("Tag", result)
    if not isinstance(result, Updated):
        logger.warning("Tag %s could not be renamed to %r", tag_id, tag_in.name)
        raise rejected("Tag", result, "updated")
    return None


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: int, service: TagService = Depends(get_tag_service)) -> None:
    """Delete a tag; its links to tasks are removed with it."""
    if not await service.delete_tag(tag_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tag with ID {tag_id} not found.",
        )
    return None
