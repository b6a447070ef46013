"""Command line entry point: run the API or create the schema."""

import argparse
import logging
import sys

from .app import create_app
from .config import Settings
from .database.connection import create_pool, get_cursor
from .database.schema import init_schema
from .errors import PlannerError
from .log_config import setup_logging

logger = logging.getLogger(__name__)


def serve(settings, debug=False):
    app = create_app(settings)
    logger.info("Server running at http://%s/", settings.server_addr)
    try:
        app.run(host=settings.host, port=settings.port, debug=debug)
    finally:
        app.extensions["db_pool"].closeall()


def init_db(settings) -> int:
    pool = create_pool(settings)
    try:
        with get_cursor(pool) as cur:
            return init_schema(cur)
    finally:
        pool.closeall()


def main(argv=None):
    """CLI entry point for the planner API."""
    parser = argparse.ArgumentParser(description="Event planner REST API")
    sub = parser.add_subparsers(dest="command", required=True)
    serve_parser = sub.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--addr", help="host:port (default: $SERVER_ADDR)")
    serve_parser.add_argument("--debug", action="store_true")
    sub.add_parser("init-db", help="Create the database tables")

    args = parser.parse_args(argv)
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_dir)

    if args.command == "init-db":
        try:
            init_db(settings)
        except PlannerError as e:
            logger.error("Schema creation failed: %s", e)
            sys.exit(1)
        return

    if args.addr:
        settings.server_addr = args.addr
    serve(settings, debug=args.debug)


if __name__ == "__main__":
    main()
