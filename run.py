"""Entry point for the Quote API.

Launches the FastAPI application under uvicorn.  Host, port and the
storage backend are taken from the environment (or a ``.env`` file in
the working directory); see ``quote_api.app.core.config`` for the
supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from quote_api.app.core.config import settings
from quote_api.app.main import app


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
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
