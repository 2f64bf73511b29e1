from __future__ import annotations

import argparse
import logging
import socket
from contextlib import asynccontextmanager
from typing import Sequence

import uvicorn
from fastapi import FastAPI

from greeting_service.config import Settings, get_settings
from greeting_service.infrastructure.greeting_store import GreetingStore
from greeting_service.interfaces.api.errors import register_exception_handlers
from greeting_service.interfaces.api.routes import register_routes
from greeting_service.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the greeting the service starts with and its shutdown."""

    logger.info("Greeting service started with %r", app.state.greeting_store.get())
    yield
    logger.info("Greeting service stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns its own greeting store, so separate instances never
    share state.
    """

    settings = settings or get_settings()

    app = FastAPI(title="Greeting Service", lifespan=lifespan)
    app.state.greeting_store = GreetingStore(settings.default_greeting)

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the HTTP listener."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Serve the greeting over HTTP.",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Interface to bind (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind (default: {settings.port})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Bind the listener and serve until interrupted.

    Returns the process exit status; ``1`` when the address cannot be bound.
    """

    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        sock = socket.create_server((args.host, args.port))
    except OSError as exc:
        logger.error("Cannot listen on %s:%s: %s", args.host, args.port, exc)
        return 1

    logger.info("Listening on http://%s:%s", args.host, args.port)
    config = uvicorn.Config(app, log_level=args.log_level.lower(), log_config=None)
    server = uvicorn.Server(config)
    with sock:
        server.run(sockets=[sock])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
