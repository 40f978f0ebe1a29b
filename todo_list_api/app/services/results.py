"""
Outcome values returned by the entity services.

Services never signal an expected business outcome with ``None`` or by
raising.  Each operation returns one of the small value types below,
so a router can tell "the tag does not exist" apart from "a tag with
that name already exists" without guessing:

* lookups return ``Found`` or ``NotFound``;
* creates return ``Created``, ``DuplicateRejected`` or
  ``MissingReferences``;
* updates return ``Updated``, ``NotFound``, ``DuplicateRejected`` or
  ``MissingReferences``.

Deletes return a plain ``bool``; "deleted" and "nothing to delete" are
the only two outcomes.
"""

from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    """No entity matched ``key`` (an id, or a natural key such as an email)."""

    key: Any


@dataclass(frozen=True)
class Created(Generic[T]):
    value: T


@dataclass(frozen=True)
class Updated:
    id: int


@dataclass(frozen=True)
class DuplicateRejected:
    """The write would give a second entity the same natural key."""

    field: str
    value: Any


@dataclass(frozen=True)
class MissingReferences:
    """The payload references related entities that do not exist."""

    field: str
    ids: Tuple[int, ...]


Lookup = Union[Found[T], NotFound]
Creation = Union[Created[T], DuplicateRejected, MissingReferences]
Update = Union[Updated, NotFound, DuplicateRejected, MissingReferences]
