"""Status commands for migrant CLI."""

from ...core.config import Config
from ...migrations import MigrationRunner
from ...store import Database


def handle_status(args, config: Config) -> None:
    """Handle status command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with Database(config.db_path) as db:
        runner = MigrationRunner(db, config.migrations_dir)
        statuses = runner.status()
        _print_status(config, statuses)


def _print_status(config: Config, statuses) -> None:
    """Print status information.

    Args:
        config: Application configuration.
        statuses: MigrationStatus objects to display.
    """
    print(f"migrant: status for environment '{config.environment}'")
    print(f"    {'Applied At':<26} Migration")
    print("    " + "=" * 50)
    for status in statuses:
        applied = status.applied_at or "Pending"
        print(f"    {applied:<26} -- {status.migration.source.name}")


def handle_version(args, config: Config) -> None:
    """Handle version command."""
    with Database(config.db_path) as db:
        print(f"migrant: version {MigrationRunner(db, config.migrations_dir).get_version()}")
