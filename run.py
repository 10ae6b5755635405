"""Entry point for the Users API.

Serves ``users_api.app.main:app`` with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``Settings`` and may be overridden on the command line.

Usage:
    python run.py [--host 127.0.0.1] [--port 8080]
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


async def run_api(host: str, port: int) -> None:
    """Start the API using Uvicorn."""
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Users API")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args()
    logging.getLogger(__name__).info("Starting Users API on %s:%s", args.host, args.port)
    asyncio.run(run_api(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
