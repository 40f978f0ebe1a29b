"""
FastAPI dependencies that build services for a request.

Everything a service needs (database location, logger) comes from
``app.state``, which ``create_app`` fills in.  Nothing here reads
module-level globals, so an application built for tests with its own
settings gets services bound to its own database.
"""

import logging

from fastapi import Request

from ..core.config import Settings
from ..repositories import TagRepository, TaskRepository, UserRepository
from ..services import TagService, TaskService, UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_logger(request: Request) -> logging.Logger:
    """Logger for the routers, a child of the application logger."""
    return request.app.state.logger.getChild("api")


def get_tag_service(request: Request) -> TagService:
    state = request.app.state
    return TagService(
        TagRepository(state.settings.database_url),
        logger=state.logger.getChild("services.tags"),
    )


def get_user_service(request: Request) -> UserService:
    state = request.app.state
    return UserService(
        UserRepository(state.settings.database_url),
        logger=state.logger.getChild("services.users"),
    )


def get_task_service(request: Request) -> TaskService:
    state = request.app.state
    database_url = state.settings.database_url
    return TaskService(
        TaskRepository(database_url),
        TagRepository(database_url),
        UserRepository(database_url),
        logger=state.logger.getChild("services.tasks"),
    )
