"""
Main entrypoint for the Admin Data API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory ``DataStore``, registers the envelope exception
handlers and includes the versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn admin_data_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.responses import register_exception_handlers
from .core.store import DataStore


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DataStore]
        Store to serve.  A store with the default seed data is created
        when omitted; tests pass their own to control the data set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging("DEBUG" if settings.debug else settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else DataStore()

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    # Seed eagerly so the first request does not pay for it; requests
    # still call ``ensure_seeded`` through the ``get_store`` dependency.
    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.store.ensure_seeded()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
