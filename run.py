"""Entry point for the Admin Data API.

Serves ``admin_data_api.app.main:app`` with Uvicorn.  Host and port
come from ``ADMIN_HOST`` and ``ADMIN_PORT`` (defaults ``0.0.0.0`` and
``8000``); see ``admin_data_api/app/core/config.py`` for the other
settings.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from admin_data_api.app.core.config import settings
from admin_data_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.admin_host,
        port=settings.admin_port,
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
