"""
Pydantic models for to-do tasks.

A task carries a title, an optional description and due date, a
completion flag, an optional owner (``user_id``) and a set of tags.
Clients reference tags by id when writing and receive the full tag
objects when reading.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .tag import TagRead


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    title: str = Field(..., min_length=1, max_length=200, examples=["Buy milk"])
    description: Optional[str] = Field(None, max_length=2000)
    is_completed: bool = False
    due_date: Optional[datetime] = None
    user_id: Optional[int] = Field(None, ge=1)
    tag_ids: List[int] = Field(default_factory=list, examples=[[1, 2]])


class TaskUpdate(BaseModel):
    """Schema for updating an existing task.

    All fields are optional; only provided values will be updated.
    ``tag_ids`` replaces the whole tag set when present.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    is_completed: Optional[bool] = None
    due_date: Optional[datetime] = None
    user_id: Optional[int] = Field(None, ge=1)
    tag_ids: Optional[List[int]] = None

    @field_validator("title", "is_completed", "tag_ids")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class TaskRead(BaseModel):
    """Schema for a task returned by the tasks API."""

    id: int
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    due_date: Optional[datetime] = None
    user_id: Optional[int] = None
    tags: List[TagRead] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }
