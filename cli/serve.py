#!/usr/bin/env python3

from api.app import create_app
from cli.migrate import apply_pending_migrations
from logger import get_logger

logger = get_logger()


def cmd_serve(args, services):
    """Apply pending migrations and run the HTTP API."""
    applied = apply_pending_migrations(services.db_manager)
    if applied:
        logger.info(f"Applied {len(applied)} pending migration(s) before startup.")

    host = args.host or services.config.server_host
    port = args.port or services.config.server_port

    app = create_app(services)
    logger.info(f"Serving Budget Tracker API on http://{host}:{port}")
    app.run(host=host, port=port, debug=args.debug, threaded=True)


def setup_parser(subparsers):
    """Setup serve subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Serve the category API with the Flask development server",
    )
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.add_argument(
        "--debug", action="store_true", help="Enable Flask debug mode"
    )
    parser.set_defaults(func=cmd_serve)
