"""Create command for migrant CLI."""

from ...core.config import Config
from ...core.types import MigrationKind
from ...migrations import create_migration

KINDS = {
    "sql": MigrationKind.SQL,
    "py": MigrationKind.PYTHON,
}


def handle_create(args, config: Config) -> None:
    """Handle create command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    path = create_migration(config.migrations_dir, args.name, KINDS[args.kind])
    print(f"migrant: created {path}")
