"""
Translation of service outcomes into HTTP errors.

Routers call these helpers for every outcome other than success so
that all three resources phrase their 400 and 404 responses the same
way.
"""

from fastapi import HTTPException, status

from ..services.results import DuplicateRejected, MissingReferences, NotFound


def not_found(entity: str, result: NotFound, key_name: str = "ID") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} with {key_name} {result.key} not found.",
    )


def rejected(entity: str, result, action: str) -> HTTPException:
    """Build the 400 response for a refused create or update."""
    if isinstance(result, DuplicateRejected):
        reason = f"{result.field} {result.value!r} is already in use"
    elif isinstance(result, MissingReferences):
        reason = f"unknown {result.field}: {', '.join(str(i) for i in result.ids)}"
    else:
        reason = "request refused"
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"{entity} could not be {action}: {reason}.",
    )
