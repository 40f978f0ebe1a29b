"""
Main entrypoint for the To-Do List API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with uvicorn or another ASGI server, e.g.::

    uvicorn todo_list_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import init_db
from .core.logging_config import setup_logging


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """Install the application-wide error handlers.

    Request validation failures become HTTP 400 (FastAPI's default is
    422).  Any exception a router lets escape is logged with its
    traceback and answered with a generic HTTP 500; callers never see
    the stack trace.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "Invalid request for %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "An error occurred while handling %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app from.  Defaults to the module-level
        ``settings`` read from the environment; tests pass their own
        to use a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    logger = setup_logging(app_settings.log_level, app_settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        version = init_db(app_settings.database_url)
        logger.info(
            "%s %s started (schema version %s)",
            app_settings.project_name,
            app_settings.api_version,
            version,
        )
        yield
        logger.info("%s shutting down", app_settings.project_name)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.logger = logger

    register_exception_handlers(app, logger.getChild("errors"))

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
