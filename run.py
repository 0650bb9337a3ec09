"""Entry point for the Movies API server.

Launches the FastAPI application under Uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``).  If the port cannot be bound, Uvicorn
exits the process with status 1.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from movies_api.app.core.config import settings
from movies_api.app.main import app

logger = logging.getLogger("movies_api")


async def run_api() -> None:
    """Serve the API until the process is stopped."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Starting server at port %d", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        pass
