# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from todo_list_api.app.core.config import Settings
from todo_list_api.app.core.db import init_db
from todo_list_api.app.main import create_app
from todo_list_api.app.repositories import TagRepository, TaskRepository, UserRepository


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file for every test."""
    return Settings(database_url=str(tmp_path / "todo.sqlite3"), log_level="DEBUG")


@pytest.fixture()
def db_path(settings: Settings) -> str:
    init_db(settings.database_url)
    return settings.database_url


@pytest.fixture()
def client(settings: Settings):
    """TestClient over an app bound to the temporary database.

    Used as a context manager so the lifespan (which applies the
    migrations) runs.
    """
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def mock_logger() -> MagicMock:
    return MagicMock(spec=logging.Logger)


# Repositories with every coroutine method replaced by an AsyncMock.
@pytest.fixture()
def tag_repository() -> AsyncMock:
    return AsyncMock(spec=TagRepository)


@pytest.fixture()
def task_repository() -> AsyncMock:
    return AsyncMock(spec=TaskRepository)


@pytest.fixture()
def user_repository() -> AsyncMock:
    return AsyncMock(spec=UserRepository)
