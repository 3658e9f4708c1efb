"""Entry point for the Trip Expense API server.

Starts the FastAPI application with Uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``trip_expense_api/app/core/config.py`` for all settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from trip_expense_api.app.core.config import settings
from trip_expense_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Trip Expense API listening on http://%s:%s", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
