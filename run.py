"""Entry point for serving the Student Roster API.

Starts uvicorn with the application from ``student_roster_api``.  Host
and port are taken from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_roster_api.app.core.config import settings
from student_roster_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
