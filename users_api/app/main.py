"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import sqlite3

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    """Answer 500 for store failures that escaped the service layer."""
    logger.error("Unhandled store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the v1 routers under ``/api/v1``,
    registers the store error handler and the startup migrations.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")
    app.add_exception_handler(sqlite3.Error, store_error_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        version = init_db()
        logger.info("Database ready at schema version %s", version)

    return app


app = create_app()
