"""
Main entrypoint for the Movies API.

This module assembles the FastAPI application, sets up logging,
creates and seeds the movie store and includes the router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn
or another ASGI server, e.g.::

    uvicorn movies_api.app.main:app

or through ``run.py`` at the project root.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import MovieStore, seed_store
from .api.router import router


def create_app(settings: Optional[Settings] = None, store: Optional[MovieStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; the module‑level settings by default.
    store : Optional[MovieStore]
        Store to serve.  When omitted, a new store seeded with the two
        initial movies is created, so every application owns its own
        records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else seed_store(MovieStore())

    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
