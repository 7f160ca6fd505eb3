"""
Main entrypoint for the Recipe Book API.

This module assembles the FastAPI application: it sets up logging,
includes the API router under ``/api``, serves the browser UI from the
static directory and manages the document store for the lifetime of
the process.  The ``create_app`` function builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn recipe_book_api.app.main:app --reload

The store is created at startup (unless one is passed to
``create_app``), opened before the first request and closed on
shutdown.
"""

import contextlib
import logging
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import RecipeStore, StoreError, build_store

logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Return the serialised store error with HTTP 500."""
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content=exc.to_dict())


def create_app(store: Optional[RecipeStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecipeStore]
        Document store to use.  When omitted the store is built from
        ``settings`` during startup.
    settings : Optional[Settings]
        Application settings; defaults to the module-level instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.store is None:
            app.state.store = build_store(settings)
        await app.state.store.open()
        try:
            yield
        finally:
            await app.state.store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.settings = settings

    app.add_exception_handler(StoreError, store_error_handler)
    app.include_router(api_router, prefix="/api")

    # Mounted last so that /api routes take precedence over static files.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; UI will not be served", static_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
