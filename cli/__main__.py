#!/usr/bin/env python3
"""
Budget Tracker CLI - command-line interface for categories and the HTTP API.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Manage and suggest categories
    migrate      Database migrations
    serve        Run the HTTP API

Examples:
    python -m cli migrate apply
    python -m cli categories seed
    python -m cli categories create Groceries --description "Food shopping"
    python -m cli categories suggest "Starbucks coffee"
    python -m cli serve --port 8080
"""

import sys
import argparse
from cli import categories, migrate, serve
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Budget Tracker - categories and category suggestions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    migrate.setup_parser(subparsers)
    serve.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Migrate commands need db_manager for raw database operations
            if args.command == "migrate":
                args.func(args, DatabaseManager(config))
            else:
                args.func(args, Services(config))
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
