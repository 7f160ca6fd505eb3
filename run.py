"""Entry point for the Recipe Book server.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (or a ``.env``
file); the port falls back to ``3000``.  Cosmos DB credentials are
read the same way, see ``recipe_book_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recipe_book_api.app.core.config import settings
from recipe_book_api.app.main import app


async def main() -> None:
    """Serve the API and the browser UI until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
