"""Entry point for serving the To-Do List API.

Starts the FastAPI application with Uvicorn.  Host, port and the rest
of the configuration are read from environment variables (see
``todo_list_api.app.core.config``); command-line flags override the
bind address.

Usage:
    python run.py
    python run.py --host 0.0.0.0 --port 8080
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from todo_list_api.app.core.config import settings
from todo_list_api.app.main import app


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the To-Do List API.")
    ap.add_argument("--host", default=settings.api_host, help="Bind address (default: API_HOST)")
    ap.add_argument("--port", type=int, default=settings.api_port, help="Bind port (default: API_PORT)")
    return ap.parse_args(argv)


async def run_api(host: str, port: int) -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.getLogger("todo_list_api").info("Serving on %s:%s", args.host, args.port)
    asyncio.run(run_api(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
