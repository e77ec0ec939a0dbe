"""Entry point for the Users API.

Starts the application under Uvicorn.  The listening port comes from
the ``PORT`` environment variable (default ``8080``) and the bind
address from ``HOST`` (default ``0.0.0.0``).  See
``users_api/app/core/config.py`` for all supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app

logger = logging.getLogger("users_api")


async def main() -> None:
    """Serve the API until interrupted."""
    port = settings.port
    logger.info("Server starting on port %s", port)
    logger.info("Health check available at: http://localhost:%s/health", port)
    logger.info("API endpoints available at: http://localhost:%s/api/users", port)
    config = Config(
        app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower(),
        access_log=settings.access_log,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
