"""Entry point for the Ukrainian Learning API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``); see ``ukrainian_learning_api/app/core/config.py`` for
the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from ukrainian_learning_api.app.core.config import settings
from ukrainian_learning_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
