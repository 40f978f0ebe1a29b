"""
User endpoints.

CRUD routes for users plus lookup by e-mail address.  E-mail
addresses are unique; a second registration with the same address is
refused with HTTP 400.  No authentication is performed.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ...schemas.user import UserCreate, UserRead, UserUpdate
from ...services import UserService
from ...services.results import Created, NotFound, Updated
from ..deps import get_logger, get_user_service
from ..errors import not_found, rejected

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def get_all_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every registered user."""
    return await service.get_all_users()


@router.get("/email/{email:path}", response_model=UserRead)
async def get_user_by_email(email: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Look a user up by e-mail address, or 404."""
    result = await service.get_user_by_email(email)
    if isinstance(result, NotFound):
        raise not_found("User", result, key_name="email")
    return result.value


@router.get("/{user_id}", response_model=UserRead)
async def get_user_by_id(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    result = await service.get_user_by_id(user_id)
    if isinstance(result, NotFound):
        raise not_found("User", result)
    return result.value


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def add_user(
    user_in: UserCreate,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> UserRead:
    """Register a user.  Returns 400 if the e-mail address is taken."""
    result = await service.create_user(user_in)
    if not isinstance(result, Created):
        logger.warning("User %s could not be created", user_in.email)
        raise rejected("User", result, "created")
    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=result.value.id))
    return result.value


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> None:
    """Update a user's e-mail or name."""
    result = await service.update_user(user_id, user_in)
    if isinstance(result, NotFound):
        raise not_found("User", result)
    if not isinstance(result, Updated):
        logger.warning("User %s could not be updated", user_id)
        raise rejected("User", result, "updated")
    return None


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user.  Tasks owned by the user are kept without an owner."""
    if not await service.delete_user(user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found.",
        )
    return None
