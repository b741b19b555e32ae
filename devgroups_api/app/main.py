"""
Main entrypoint for the Developer Social Groups API.

``create_app`` assembles the FastAPI application: it configures
logging, registers the domain error handler, mounts the versioned
routers and manages the storage context.  The module level ``app`` can
be served directly, e.g.::

    uvicorn devgroups_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import StorageContext, open_storage
from .core.errors import DevGroupsError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(storage: Optional[StorageContext] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[StorageContext]
        Storage to serve from.  When omitted, the database configured
        by ``DATABASE_URL`` is opened on startup and closed on shutdown;
        an injected storage is left open for its owner to close.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.storage = storage

    @app.exception_handler(DevGroupsError)
    async def devgroups_error_handler(request: Request, exc: DevGroupsError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.storage is None:
            app.state.storage = open_storage()
            app.state.owns_storage = True

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if getattr(app.state, "owns_storage", False):
            app.state.storage.close()
            app.state.storage = None
            app.state.owns_storage = False
            logger.info("Storage closed")

    return app


# Created at import time so uvicorn can discover it.  Storage is only
# opened on startup, so importing this module does not touch disk.
app = create_app()
