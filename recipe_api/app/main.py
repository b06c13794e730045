"""
Main entrypoint for the Recipe API.

This module assembles the FastAPI application, sets up logging, error
handlers and CORS, and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn recipe_api.app.main:app --reload

or via ``run.py`` at the project root.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.db import get_database_path, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below may log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # The unversioned ``/api`` prefix is what existing clients use;
    # ``/api/v1`` exposes the same endpoints for versioned clients.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()
        logging.getLogger(__name__).info(
            "Recipe API started (env=%s, db=%s)", settings.environment, get_database_path()
        )

    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
