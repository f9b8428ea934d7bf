"""Level CLI — inspect the route table and resolve URLs.

Entry point registered as ``level`` in ``pyproject.toml``::

    [project.scripts]
    level = "level.cli:main"
"""

import argparse
import logging
import sys

from level.config import AppConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``level`` command."""
    parser = argparse.ArgumentParser(
        prog="level",
        description="Level — routes and post listings for team spaces.",
    )
    parser.add_argument(
        "--log-level",
        default=AppConfig().log_level,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- level routes -----------------------------------------------------
    subparsers.add_parser("routes", help="List the application routes")

    # -- level parse ------------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Resolve a URL to its route")
    parse_parser.add_argument("url", help="Path with optional query, e.g. /acme/feed?state=open")

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from level.cli._routes import run_routes

        run_routes(args)
    elif args.command == "parse":
        from level.cli._parse import run_parse

        run_parse(args)
