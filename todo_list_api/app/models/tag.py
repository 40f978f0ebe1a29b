"""Tag entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tag:
    name: str
    id: Optional[int] = None
