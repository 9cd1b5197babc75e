"""``openfinder`` command: run the search aggregator HTTP server."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from openfinder.config.settings import Settings

APP_FACTORY = "openfinder.api.app:create_app"


def build_parser() -> argparse.ArgumentParser:
    """Build the ``openfinder`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="openfinder",
        description="OpenFinder: search books, public-domain texts, photos and archive media in one query",
    )
    parser.add_argument("--config", "-c", type=Path, default=None, help="Path to YAML configuration file")
    parser.add_argument("--host", default=None, help="Bind address (overrides config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port (overrides config)")
    parser.add_argument("--workers", "-w", type=int, default=None, help="Number of worker processes")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument("--version", action="version", version=f"OpenFinder {_get_version()}")
    return parser


def load_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Settings:
    """Load settings from ``--config`` (or env/.env) and apply command-line overrides."""
    from openfinder.config.settings import Settings

    if args.config is not None:
        if not args.config.exists():
            parser.error(f"config file not found: {args.config}")
        settings = Settings.from_yaml(args.config)
    else:
        settings = Settings()

    overrides = [
        (settings.server, "host", args.host),
        (settings.server, "port", args.port),
        (settings.server, "workers", args.workers),
        (settings.observability, "log_level", args.log_level),
    ]
    for section, field, value in overrides:
        if value is not None:
            setattr(section, field, value)
    return settings


def main(argv: list[str] | None = None) -> None:
    """Entry point of the ``openfinder`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args, parser)

    # Bootstrap logging until the app lifespan installs structlog
    logging.basicConfig(
        level=getattr(logging, settings.observability.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    host, port = settings.server.host, settings.server.port
    if not _port_available(host, port):
        print(f"error: port {port} is already in use (try 'lsof -i :{port}')", file=sys.stderr)
        sys.exit(1)

    import uvicorn

    log_level = settings.observability.log_level.lower()
    if args.reload or settings.server.workers > 1:
        # Worker processes rebuild the app from env/YAML, so pass the factory by import path
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=host,
            port=port,
            workers=1 if args.reload else settings.server.workers,
            reload=args.reload,
            log_level=log_level,
        )
        return

    from openfinder.api.app import create_app

    uvicorn.run(create_app(settings), host=host, port=port, log_level=log_level)


def _port_available(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind(("127.0.0.1" if host == "0.0.0.0" else host, port))
        except OSError:
            return False
    return True


def _get_version() -> str:
    from openfinder import __version__

    return __version__


if __name__ == "__main__":
    main()
