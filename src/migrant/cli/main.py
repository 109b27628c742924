"""CLI entry point for migrant."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import load_config
from . import commands


def non_negative_int(value: str) -> int:
    """Parse a version number, rejecting negatives."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid version: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"version must be >= 0, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="migrant",
        description="Versioned schema migrations for SQLite",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=Path("db"),
        help="Folder containing dbconf.yml and migrations (default: db)",
    )
    parser.add_argument(
        "-e",
        "--env",
        default=None,
        help="Environment section of dbconf.yml (default: development)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    up_parser = subparsers.add_parser("up", help="Migrate to the most recent or a given version")
    up_parser.add_argument(
        "-t",
        "--target",
        type=non_negative_int,
        default=None,
        help="Version to migrate to (default: most recent)",
    )

    subparsers.add_parser("down", help="Roll back the current migration")
    subparsers.add_parser("redo", help="Roll back and re-apply the current migration")
    subparsers.add_parser("status", help="Show applied state of each migration")
    subparsers.add_parser("version", help="Print the current version")

    new_parser = subparsers.add_parser("create", help="Create a new migration file")
    new_parser.add_argument("name", help="Migration description")
    new_parser.add_argument(
        "--type",
        dest="kind",
        choices=["sql", "py"],
        default="sql",
        help="Migration kind (default: sql)",
    )

    return parser


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.path, args.env)
        configure_logging("DEBUG" if args.verbose else config.log_level)

        if args.command == "up":
            commands.handle_up(args, config)
        elif args.command == "down":
            commands.handle_down(args, config)
        elif args.command == "redo":
            commands.handle_redo(args, config)
        elif args.command == "status":
            commands.handle_status(args, config)
        elif args.command == "version":
            commands.handle_version(args, config)
        elif args.command == "create":
            commands.handle_create(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
