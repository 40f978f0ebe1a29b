"""
Pydantic schemas for tags.

A tag is a short, unique label that can be attached to any number of
tasks.  Names are compared exactly, so ``"Urgent"`` and ``"urgent"``
are two different tags.
"""

from pydantic import BaseModel, Field


class TagCreate(BaseModel):
    """Schema for creating a tag."""

    name: str = Field(..., min_length=1, max_length=50, examples=["Urgent"])


class TagUpdate(BaseModel):
    """Schema for renaming a tag."""

    name: str = Field(..., min_length=1, max_length=50, examples=["Later"])


class TagRead(BaseModel):
    """Schema for reading a tag."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
