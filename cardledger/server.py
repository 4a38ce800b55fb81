"""
Run the HTTP API.

Usage:
    cardledger-server cards.db
    cardledger-server --port 8000
"""

import argparse
import logging

import uvicorn

from cardledger.config import LOG_FORMAT, settings, sqlite_url
from cardledger.main import app


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the API server."""
    parser = argparse.ArgumentParser(description="Card collection API server")
    parser.add_argument(
        "database",
        nargs="?",
        help="SQLite database file (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port (default: {settings.port})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    if args.database:
        settings.database_url = sqlite_url(args.database)

    logging.getLogger(__name__).info(
        "Serving %s on %s:%d", settings.database_url, args.host, args.port
    )
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
