"""
Main entrypoint for the Student Roster API.

``create_app`` configures logging and mounts the versioned routers;
the module-level ``app`` lets uvicorn find the application directly::

    uvicorn student_roster_api.app.main:app --reload

Title and version come from ``Settings`` in ``core.config``.
"""

import logging

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import store


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        The application with logging configured and ``/api/v1`` routes
        mounted.
    """
    # Logging first so that startup messages below are formatted.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).info(
        "%s %s ready with %d students", settings.project_name, settings.api_version, len(store)
    )
    return app


app = create_app()
