"""
Pydantic models for user data.

Users are identified by their e-mail address, which must be unique.
No credentials are stored; the API performs no authentication.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(BaseModel):
    """Schema for registering a user."""

    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN, examples=["user@example.com"])
    full_name: Optional[str] = Field(None, max_length=200, examples=["Jane Doe"])


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided values will be updated.
    Sending ``full_name: null`` clears the name.
    """

    email: Optional[str] = Field(None, max_length=254, pattern=EMAIL_PATTERN)
    full_name: Optional[str] = Field(None, max_length=200)

    @field_validator("email")
    @classmethod
    def reject_null_email(cls, v):
        if v is None:
            raise ValueError("email may be omitted but not null")
        return v


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    email: str
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }
