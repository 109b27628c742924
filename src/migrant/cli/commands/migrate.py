"""Migration commands for migrant CLI."""

from ...core.config import Config
from ...migrations import MigrationRunner, StepResult
from ...store import Database


def _print_step(result: StepResult) -> None:
    print(result)


def handle_up(args, config: Config) -> None:
    """Handle up command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with Database(config.db_path) as db:
        runner = MigrationRunner(db, config.migrations_dir)
        current = runner.get_version()
        plan = runner.plan(args.target)

        if not plan:
            print(f"migrant: no migrations to run. current version: {current}")
            return

        print(
            f"migrant: migrating db environment '{config.environment}', "
            f"current version: {current}, {plan.describe()}"
        )
        runner.run(args.target, on_step=_print_step)


def handle_down(args, config: Config) -> None:
    """Handle down command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with Database(config.db_path) as db:
        runner = MigrationRunner(db, config.migrations_dir)
        if not runner.down(on_step=_print_step):
            print(f"migrant: no migrations to roll back. current version: {runner.get_version()}")


def handle_redo(args, config: Config) -> None:
    """Handle redo command."""
    with Database(config.db_path) as db:
        runner = MigrationRunner(db, config.migrations_dir)
        if not runner.redo(on_step=_print_step):
            print(f"migrant: nothing to redo. current version: {runner.get_version()}")
