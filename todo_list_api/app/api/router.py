"""
Top-level API router.

Aggregates the resource routers under a single router which
``create_app`` mounts at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import tags, tasks, users

router = APIRouter()

router.include_router(tags.router, prefix="/tags", tags=["tags"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(users.router, prefix="/users", tags=["users"])
