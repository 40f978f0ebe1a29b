"""
Business logic for users.

The e-mail address is the natural key: it must be unique and can be
used to look a user up.  Uniqueness is checked before every create and
every e-mail change, with the schema's ``UNIQUE`` constraint as the
backstop for concurrent writes.
"""

import logging
from typing import List, Optional

from ..core.logging_config import get_app_logger
from ..repositories import DuplicateKeyError, UserRepository
from ..schemas.user import UserCreate, UserRead, UserUpdate
from .mapping import UserMapper
from .results import Created, Creation, DuplicateRejected, Found, Lookup, NotFound, Update, Updated


class UserService:
    """Service class for managing users."""

    def __init__(
        self,
        repository: UserRepository,
        mapper: Optional[UserMapper] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.repository = repository
        self.mapper = mapper or UserMapper()
        self.logger = logger or get_app_logger("services.users")

    async def get_user_by_id(self, user_id: int) -> Lookup[UserRead]:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            return NotFound(user_id)
        return Found(self.mapper.to_read(user))

    async def get_user_by_email(self, email: str) -> Lookup[UserRead]:
        user = await self.repository.get_by_email(email)
        if user is None:
            return NotFound(email)
        return Found(self.mapper.to_read(user))

    async def get_all_users(self) -> List[UserRead]:
        users = await self.repository.get_all()
        return [self.mapper.to_read(user) for user in users]

    async def create_user(self, data: UserCreate) -> Creation[UserRead]:
        """Register a user unless the e-mail address is already taken."""
        if await self.repository.get_by_email(data.email) is not None:
            self.logger.debug("User %s already exists; creation refused", data.email)
            return DuplicateRejected("email", data.email)
        try:
            user = await self.repository.add(self.mapper.to_entity(data))
        except DuplicateKeyError as exc:
            return DuplicateRejected(exc.field, exc.value)
        self.logger.info("Registered user %s (%s)", user.id, user.email)
        return Created(self.mapper.to_read(user))

    async def update_user(self, user_id: int, data: UserUpdate) -> Update:
        existing = await self.repository.get_by_id(user_id)
        if existing is None:
            return NotFound(user_id)
        if "email" in data.model_fields_set and data.email != existing.email:
            if await self.repository.get_by_email(data.email) is not None:
                self.logger.debug("User %s cannot take e-mail %s: taken", user_id, data.email)
                return DuplicateRejected("email", data.email)
        updated = self.mapper.apply_update(data, existing)
        try:
            await self.repository.update(updated)
        except DuplicateKeyError as exc:
            return DuplicateRejected(exc.field, exc.value)
        self.logger.info("Updated user %s", user_id)
        return Updated(user_id)

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user.  Tasks the user owned remain, without an owner."""
        existing = await self.repository.get_by_id(user_id)
        if existing is None:
            return False
        await self.repository.delete(existing)
        self.logger.info("Deleted user %s", user_id)
        return True
