"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can start with no configuration at all; in a deployment you
should override them via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "To-Do List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a file that receives a copy of every log record.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "todo_list.db")

    # Bind address used by ``run.py``.
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
