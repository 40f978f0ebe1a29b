"""User entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    email: str
    full_name: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
