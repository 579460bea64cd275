"""Entry point for the Phonebook API.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``phonebook_api.app.core.config``; the defaults are ``0.0.0.0`` and
``3001``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from phonebook_api.app.core.config import settings
from phonebook_api.app.main import app


async def main() -> None:
    """Run the API server until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Requests are already logged by the application middleware.
        access_log=False,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
