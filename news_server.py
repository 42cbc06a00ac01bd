#!/usr/bin/env python
# ABOUTME: Flask application factory and command line entry point for the Newsboard API
# ABOUTME: Opens the database once at startup, serves /api, and closes the pool on every exit path

import argparse
import os
import sys
from typing import Any

from flask import Flask

from api import register_api
from core.postgres_database import PostgresDatabase, PostgresDatabaseError, get_postgres_connection_string
from core.repositories import Repositories
from core.seed import seed
from core.seed_data import SAMPLE_DATA
from utils.console_output import configure_logging, print_error, print_info, print_section, print_success


def env_flag(name: str, default: bool = True) -> bool:
    return os.environ.get(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


def create_app(db: PostgresDatabase, config: dict[str, Any] | None = None) -> Flask:
    """
    Build the Flask app around an already opened database handle.

    The caller owns ``db`` and is responsible for closing it.

    Args:
        db: Open database handle shared by all requests
        config: Optional Flask config overrides (e.g. {"TESTING": True, "RATELIMIT_ENABLED": False})

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["RATELIMIT_ENABLED"] = env_flag("NEWSBOARD_RATELIMIT_ENABLED", True)
    if config:
        app.config.update(config)

    app.extensions["newsboard"] = Repositories.from_database(db)
    register_api(app)

    return app


def open_database(skip_schema_setup: bool = False) -> PostgresDatabase:
    connection_string = get_postgres_connection_string()
    print_info(f"Connecting to PostgreSQL at {connection_string.split('@')[-1]}")
    return PostgresDatabase(connection_string, skip_schema_setup=skip_schema_setup)


def cmd_serve(args: argparse.Namespace) -> int:
    with open_database() as db:
        app = create_app(db)
        print_section("Newsboard API")
        print_info(f"Listening on http://{args.host}:{args.port}/api")
        app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    with open_database(skip_schema_setup=True) as db:
        print_section("Seeding database")
        seed(db, SAMPLE_DATA)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    with open_database(skip_schema_setup=True) as db:
        if not db.health_check():
            print_error("Database is not reachable")
            return 1
        print_success("Database is reachable")
        for key, value in db.get_database_info().items():
            print_info(f"  {key}: {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Newsboard API: topics, articles, comments and users over PostgreSQL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s serve --port 9090
  %(prog)s seed
  %(prog)s check

Database connection is read from DATABASE_URL or POSTGRES_HOST/PORT/DB/USER/PASSWORD.
""",
    )
    parser.add_argument("--log-level", default=os.environ.get("NEWSBOARD_LOG_LEVEL", "INFO"), help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=os.environ.get("HOST", "127.0.0.1"), help="Bind address")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "9090")), help="Bind port")
    serve_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    serve_parser.set_defaults(func=cmd_serve)

    seed_parser = subparsers.add_parser("seed", help="Drop, recreate and load the sample dataset")
    seed_parser.set_defaults(func=cmd_seed)

    check_parser = subparsers.add_parser("check", help="Check database connectivity and row counts")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level.upper())

    try:
        return args.func(args)
    except PostgresDatabaseError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
