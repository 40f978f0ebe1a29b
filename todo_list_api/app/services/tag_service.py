"""
Business logic for tags.

Tag names are unique.  ``create_tag`` looks the name up before writing
and refuses duplicates without touching storage; ``update_tag`` refuses
a rename onto a name held by another tag.  The check and the write are
not atomic, so the ``UNIQUE`` constraint in the schema backs them up:
a ``DuplicateKeyError`` raised by the repository is reported as the
same ``DuplicateRejected`` outcome.
"""

import logging
from typing import List, Optional

from ..core.logging_config import get_app_logger
from ..repositories import DuplicateKeyError, TagRepository
from ..schemas.tag import TagCreate, TagRead, TagUpdate
from .mapping import TagMapper
from .results import Created, Creation, DuplicateRejected, Found, Lookup, NotFound, Update, Updated


class TagService:
    """Service class for managing tags."""

    def __init__(
        self,
        repository: TagRepository,
        mapper: Optional[TagMapper] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.repository = repository
        self.mapper = mapper or TagMapper()
        self.logger = logger or get_app_logger("services.tags")

    async def get_tag_by_id(self, tag_id: int) -> Lookup[TagRead]:
        tag = await self.repository.get_by_id(tag_id)
        if tag is None:
            return NotFound(tag_id)
        return Found(self.mapper.to_read(tag))

    async def get_all_tags(self) -> List[TagRead]:
        tags = await self.repository.get_all()
        return [self.mapper.to_read(tag) for tag in tags]

    async def create_tag(self, data: TagCreate) -> Creation[TagRead]:
        """Create a tag unless one with the same name already exists."""
        if await self.repository.get_by_name(data.name) is not None:
            self.logger.debug("Tag %r already exists; creation refused", data.name)
            return DuplicateRejected("name", data.name)
        try:
            tag = await self.repository.add(self.mapper.to_entity(data))
        except DuplicateKeyError as exc:
            self.logger.debug("Tag %r inserted concurrently; creation refused", data.name)
            return DuplicateRejected(exc.field, exc.value)
        self.logger.info("Created tag %s (%s)", tag.id, tag.name)
        return Created(self.mapper.to_read(tag))

    async def update_tag(self, tag_id: int, data: TagUpdate) -> Update:
        """Rename a tag.

        Returns ``NotFound`` if the tag does not exist and
        ``DuplicateRejected`` if another tag already uses the new name.
        """
        existing = await self.repository.get_by_id(tag_id)
        if existing is None:
            return NotFound(tag_id)
        holder = await self.repository.get_by_name(data.name)
        if holder is not None and holder.id != tag_id:
            self.logger.debug("Tag %s cannot be renamed to %r: name taken", tag_id, data.name)
            return DuplicateRejected("name", data.name)
        try:
            await self.repository.update(self.mapper.apply_update(data, existing))
        except DuplicateKeyError as exc:
            return DuplicateRejected(exc.field, exc.value)
        self.logger.info("Updated tag %s", tag_id)
        return Updated(tag_id)

    async def delete_tag(self, tag_id: int) -> bool:
        """Delete a tag by id.  Returns ``False`` if there was nothing to delete."""
        existing = await self.repository.get_by_id(tag_id)
        if existing is None:
            return False
        await self.repository.delete(existing)
        self.logger.info("Deleted tag %s", tag_id)
        return True
